from __future__ import annotations

import argparse
import logging
import sys

from typing import Optional, Sequence

from .config import DEFAULT_LENGTH, LOG_FORMAT, LOG_LEVEL, MAX_LENGTH, MIN_LENGTH
from .core.charsets import CLASS_ORDER, CharacterClass
from .core.password_generator import GenerationConfig
from .core.session import GenerationResult, GeneratorSession

logger = logging.getLogger(__name__)

_CLASS_FLAGS = {
    CharacterClass.UPPER: 'no_upper',
    CharacterClass.LOWER: 'no_lower',
    CharacterClass.DIGIT: 'no_digits',
    CharacterClass.SPECIAL: 'no_special',
}


def format_result(result: GenerationResult) -> str:
    """Render a result as a single line for the terminal."""
    if not result.ok:
        return f'[!] {result.text}'
    return f'{result.text}  [{result.strength.text.upper()}]'


def action_generate_password(session: GeneratorSession) -> None:
    """Generate a password and display it to the user."""
    result = session.refresh()
    print('Generated password:', format_result(result), '\n')


def action_toggle_classes(session: GeneratorSession) -> None:
    """Let the user switch character classes on and off."""
    for index, cls in enumerate(CLASS_ORDER, start=1):
        mark = 'x' if session.config.is_enabled(cls) else ' '
        print(f' {index}) [{mark}] {cls.label}')

    choice = input('Toggle which class? ').strip()
    if not choice.isdigit() or not 1 <= int(choice) <= len(CLASS_ORDER):
        print('Invalid selection.\n')
        return

    result = session.toggle(CLASS_ORDER[int(choice) - 1])
    print('Generated password:', format_result(result), '\n')


def action_set_length(session: GeneratorSession) -> None:
    """Prompt for a new length, clamped to the allowed range."""
    length_input = input(f'Length ({MIN_LENGTH}-{MAX_LENGTH}, current {session.length}): ').strip()

    if not length_input.isdigit():
        print('Length unchanged.\n')
        return

    result = session.set_length(int(length_input))
    print('Length set to', session.length)
    print('Generated password:', format_result(result), '\n')


def action_show_settings(session: GeneratorSession) -> None:
    """Print the current length and enabled classes."""
    enabled = [cls.label for cls in CLASS_ORDER if session.config.is_enabled(cls)]
    print('Length:', session.length)
    print('Classes:', ' '.join(enabled) if enabled else '(none)', '\n')


def show_menu() -> str:
    """Print the main menu and return the user's choice."""
    print('===== Password Generator =====')
    print('1) Generate password')
    print('2) Toggle character classes')
    print('3) Set length')
    print('4) Show settings')
    print('5) Quit')
    return input('Select an option: ').strip()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='passgen',
        description='Generate random passwords and rate their strength.',
    )
    parser.add_argument('-l', '--length', type=int, default=DEFAULT_LENGTH, help='password length')
    parser.add_argument('--no-upper', action='store_true', help='exclude uppercase letters')
    parser.add_argument('--no-lower', action='store_true', help='exclude lowercase letters')
    parser.add_argument('--no-digits', action='store_true', help='exclude digits')
    parser.add_argument('--no-special', action='store_true', help='exclude special characters')
    parser.add_argument('--once', action='store_true', help='print one password and exit')
    parser.add_argument('--gui', action='store_true', help='launch the Tkinter window')
    parser.add_argument('--log-level', default=LOG_LEVEL, help='logging level (default: %(default)s)')
    return parser


def config_from_args(args: argparse.Namespace) -> GenerationConfig:
    """Translate parsed CLI flags into a GenerationConfig."""
    enabled = frozenset(cls for cls, flag in _CLASS_FLAGS.items() if not getattr(args, flag))
    return GenerationConfig(length=args.length, enabled_classes=enabled)


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point for the CLI."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format=LOG_FORMAT)

    if args.gui:
        from .ui.app import main as gui_main

        gui_main()
        return

    session = GeneratorSession(config=config_from_args(args))
    logger.debug('Session started with length %d', session.length)

    if args.once:
        assert session.result is not None
        print(format_result(session.result))
        sys.exit(0 if session.result.ok else 1)

    while True:
        choice = show_menu()
        print()

        if choice == '1':
            action_generate_password(session)
        elif choice == '2':
            action_toggle_classes(session)
        elif choice == '3':
            action_set_length(session)
        elif choice == '4':
            action_show_settings(session)
        elif choice == '5':
            print('Goodbye.')
            sys.exit(0)
        else:
            print('Invalid selection.\n')


if __name__ == '__main__':
    main()
