# /hms/console/io.py
"""
Console collaborator.

The session and controllers talk to the operator only through ``echo`` and
``prompt``; ``ClickConsole`` is the terminal implementation.
"""
import click

from hms.exceptions import InvalidInputError


class Console:
    def echo(self, text: str = '') -> None:
        raise NotImplementedError

    def prompt(self, text: str, hide_input: bool = False) -> str:
        raise NotImplementedError


class ClickConsole(Console):
    def echo(self, text: str = '') -> None:
        click.echo(text)

    def prompt(self, text: str, hide_input: bool = False) -> str:
        return click.prompt(text, default='', show_default=False,
                            hide_input=hide_input, prompt_suffix=' ')


def ask(console: Console, text: str, parse=str.strip, hide_input: bool = False):
    """Prompts until ``parse`` accepts the answer."""
    while True:
        answer = console.prompt(text, hide_input=hide_input)
        try:
            return parse(answer)
        except InvalidInputError as e:
            console.echo(str(e))
