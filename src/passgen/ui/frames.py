from __future__ import annotations

import tkinter as tk

from tkinter import messagebox, ttk
from typing import TYPE_CHECKING

from ..config import COPIED_LABEL, COPY_FAILED_MESSAGE, COPY_LABEL, COPY_RESET_MS
from ..core.charsets import CLASS_ORDER, CharacterClass
from ..core.session import GenerationResult
from .widgets import LengthControl, StrengthBadge

if TYPE_CHECKING:
    from .app import PasswordGeneratorApp


class GeneratorFrame(ttk.Frame):
    """Password display, strength badge, length control and class toggles."""

    def __init__(self, parent: tk.Widget, controller: PasswordGeneratorApp) -> None:
        super().__init__(parent)
        self.controller = controller
        self._reset_job: str | None = None

        ttk.Label(
            self,
            text='Random Password Generator',
            font=('TkDefaultFont', 16),
        ).pack(pady=10)

        row = ttk.Frame(self)
        row.pack(pady=10)

        self._password_var = tk.StringVar()
        ttk.Entry(
            row,
            textvariable=self._password_var,
            state='readonly',
            width=42,
            font=('TkFixedFont', 12),
        ).pack(side='left', padx=5)

        self._badge = StrengthBadge(row)
        self._badge.pack(side='left', padx=5)

        ttk.Button(row, text='Refresh', command=self._on_refresh).pack(side='left', padx=5)

        self._copy_button = ttk.Button(row, text=COPY_LABEL, command=self._on_copy)
        self._copy_button.pack(side='left', padx=5)

        ttk.Label(self, text='Password Length').pack(pady=(15, 5))
        self._length = LengthControl(self, on_step=self._on_step, on_slide=self._on_slide)
        self._length.pack(pady=5)

        ttk.Label(self, text='Characters Used').pack(pady=(15, 5))
        toggles = ttk.Frame(self)
        toggles.pack(pady=5)

        self._class_vars: dict[CharacterClass, tk.BooleanVar] = {}
        for cls in CLASS_ORDER:
            var = tk.BooleanVar()
            self._class_vars[cls] = var
            ttk.Checkbutton(
                toggles,
                text=cls.label,
                variable=var,
                command=lambda c=cls: self._on_toggle(c),
            ).pack(side='left', padx=10)

    def render(self, result: GenerationResult) -> None:
        """Sync every widget with the session state and `result`."""
        session = self.controller.session

        self._password_var.set(result.text)
        self._badge.show(result.strength)
        self._length.show(session.length)
        for cls, var in self._class_vars.items():
            var.set(session.config.is_enabled(cls))

        self._copy_button.state(['!disabled'] if result.ok else ['disabled'])

    def _on_refresh(self) -> None:
        self.render(self.controller.session.refresh())

    def _on_step(self, delta: int) -> None:
        self.render(self.controller.session.change_length(delta))

    def _on_slide(self, length: int) -> None:
        if length == self.controller.session.length:
            return
        self.render(self.controller.session.set_length(length))

    def _on_toggle(self, cls: CharacterClass) -> None:
        self.render(self.controller.session.toggle(cls))

    def _on_copy(self) -> None:
        """Copy the current password and flash a confirmation on the button."""
        result = self.controller.session.result
        if result is None or not result.ok:
            return

        try:
            self.clipboard_clear()
            self.clipboard_append(result.text)
        except tk.TclError:
            messagebox.showerror('Error', COPY_FAILED_MESSAGE)
            return

        self._copy_button.configure(text=COPIED_LABEL)
        if self._reset_job is not None:
            self.after_cancel(self._reset_job)
        self._reset_job = self.after(COPY_RESET_MS, self._reset_copy_label)

    def _reset_copy_label(self) -> None:
        self._reset_job = None
        self._copy_button.configure(text=COPY_LABEL)
