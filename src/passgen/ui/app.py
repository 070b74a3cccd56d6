from __future__ import annotations

import tkinter as tk

from tkinter import ttk

from ..core.session import GeneratorSession
from .frames import GeneratorFrame


class PasswordGeneratorApp(tk.Tk):
    """
    Top-level Tkinter application for the password generator.

    This GUI is a thin layer over the core session:
    - GeneratorSession holds the settings and the last result.
    - GeneratorFrame renders that result and forwards user input.
    """

    WINDOW_WIDTH = 760
    WINDOW_HEIGHT = 340

    def __init__(self, session: GeneratorSession | None = None) -> None:
        super().__init__()

        self.title('Password Generator')
        self.geometry(f'{self.WINDOW_WIDTH}x{self.WINDOW_HEIGHT}')
        self.minsize(self.WINDOW_WIDTH, self.WINDOW_HEIGHT)

        self.session = session or GeneratorSession()

        container = ttk.Frame(self)
        container.pack(fill='both', expand=True)

        self.frame = GeneratorFrame(parent=container, controller=self)
        self.frame.pack(fill='both', expand=True)

        assert self.session.result is not None
        self.frame.render(self.session.result)


def main() -> None:
    """Entry point for launching the Tkinter GUI."""
    app = PasswordGeneratorApp()
    app.mainloop()


if __name__ == '__main__':
    main()
