from __future__ import annotations

import tkinter as tk

from tkinter import ttk
from typing import Callable

from ..config import MAX_LENGTH, MIN_LENGTH
from ..core.strength import StrengthLabel


class StrengthBadge(tk.Label):
    """Coloured label showing a StrengthLabel."""

    def __init__(self, parent: tk.Widget) -> None:
        super().__init__(parent, fg='white', padx=12, pady=4, font=('TkDefaultFont', 10, 'bold'))

    def show(self, strength: StrengthLabel) -> None:
        self.configure(text=strength.text.upper(), bg=strength.color)


class LengthControl(ttk.Frame):
    """
    A '-' button, a scale and a '+' button for picking a length.

    Args:
        parent: Parent widget.
        on_step: Called with -1 or +1 when a button is pressed.
        on_slide: Called with the new length when the scale moves.
    """

    def __init__(
        self,
        parent: tk.Widget,
        on_step: Callable[[int], None],
        on_slide: Callable[[int], None],
    ) -> None:
        super().__init__(parent)
        self._on_slide = on_slide
        self._updating = False
        self.var = tk.IntVar()

        ttk.Button(self, text='-', width=3, command=lambda: on_step(-1)).pack(side='left', padx=5)
        ttk.Scale(
            self,
            from_=MIN_LENGTH,
            to=MAX_LENGTH,
            orient='horizontal',
            length=250,
            variable=self.var,
            command=self._slide,
        ).pack(side='left', padx=5)
        ttk.Button(self, text='+', width=3, command=lambda: on_step(1)).pack(side='left', padx=5)

        self._value_label = ttk.Label(self, width=3)
        self._value_label.pack(side='left', padx=5)

    def _slide(self, raw: str) -> None:
        """Forward whole-number scale positions to the callback."""
        if self._updating:
            return
        value = int(round(float(raw)))
        if value != self.var.get():
            self.var.set(value)
        self._on_slide(value)

    def show(self, length: int) -> None:
        """Move the scale to `length` without firing the callback."""
        self._updating = True
        try:
            self.var.set(length)
            self._value_label.configure(text=str(length))
        finally:
            self._updating = False
