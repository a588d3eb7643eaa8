"""
ttlex - Teeny Token Dump Command-Line Interface
===============================================

Prints the token stream the scanner produces for a Teeny source file.
Useful when a parser rejects a program and you want to see what it was
actually given.

Usage Examples
--------------
Dump tokens:
    $ ttlex hello.teeny

With a summary line:
    $ ttlex -v hello.teeny

With scanner trace logging on stderr:
    $ ttlex --trace hello.teeny
"""

import logging
from collections import Counter
from pathlib import Path

import click

from teeny_sdk import __version__
from teeny_sdk.cli.errors import handle_cli_exception
from teeny_sdk.scanner import Scanner, ScannerOptions, Token, TokenKind


def format_token(token: Token) -> str:
    """Format one token as 'line:col  KIND  lexeme'."""
    position = f"{token.line}:{token.column}"
    if token.kind is TokenKind.END_OF_INPUT:
        return f"{position:<8} {token.kind.name}"
    return f"{position:<8} {token.kind.name:<15} {token.lexeme!r}"


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Print a summary after the tokens",
)
@click.option(
    "--trace",
    is_flag=True,
    help="Log every token as it is scanned (to stderr)",
)
@click.version_option(version=__version__, prog_name="ttlex")
def main(input_file: Path, verbose: bool, trace: bool) -> None:
    """
    Dump the tokens of a Teeny source file.

    INPUT_FILE is the Teeny program to scan.

    Each token is printed on its own line with its position, kind and
    lexeme. On a lexical error the tokens scanned so far are printed,
    followed by the error on stderr, and the exit code is 1.

    \b
    Examples:
        ttlex hello.teeny            # Token dump
        ttlex -v hello.teeny         # With a summary
    """
    options = ScannerOptions.from_env()
    options.filename = str(input_file)
    options.trace = options.trace or trace

    if options.trace:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s: %(message)s",
        )

    try:
        source = input_file.read_text(encoding="utf-8")

        counts: Counter[TokenKind] = Counter()
        for token in Scanner(source, options=options):
            click.echo(format_token(token))
            counts[token.kind] += 1

        if verbose:
            lines = len(source.splitlines())
            click.echo(
                f"\nScanned {input_file}: {sum(counts.values())} tokens, "
                f"{lines} lines"
            )
            for kind, count in sorted(counts.items(), key=lambda item: item[0].value):
                click.echo(f"  {kind.name:<15} {count}")

    except Exception as e:
        handle_cli_exception(e, verbose=verbose)


if __name__ == "__main__":
    main()
