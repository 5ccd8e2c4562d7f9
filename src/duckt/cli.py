"""CLI interface for duckt."""

from __future__ import annotations

import click
from rich.console import Console

from duckt import __version__
from duckt.animator import RevealAnimator
from duckt.art import DEFAULT_CLOSED_MOUTH, DEFAULT_OPEN_MOUTH
from duckt.config import DEFAULT_DELAY_US, DucktConfig
from duckt.errors import TemplateValidationError

console = Console()
err_console = Console(stderr=True)

FORMAT_HELP = (
    "Formats are strings with exactly one part being 'TEXT'. "
    "This part will become the message displayed."
)


@click.command(
    context_settings={"help_option_names": ["-h", "--help"]},
    epilog=FORMAT_HELP,
)
@click.argument("message", required=False, default="")
@click.option(
    "--open",
    "-o",
    "open_mouth",
    default=DEFAULT_OPEN_MOUTH,
    show_default=True,
    help="Message format when the mouth is open.",
)
@click.option(
    "--closed",
    "-c",
    "closed_mouth",
    default=DEFAULT_CLOSED_MOUTH,
    show_default=True,
    help="Message format when the mouth is closed.",
)
@click.option(
    "--delay",
    "-m",
    "delay_us",
    type=click.IntRange(min=0),
    default=DEFAULT_DELAY_US,
    show_default=True,
    help="Delay between frames in microseconds.",
)
@click.option(
    "--auto",
    "-A",
    "animation",
    flag_value="auto",
    default=True,
    help="Animate only when output is a terminal (default).",
)
@click.option("--never", "-N", "animation", flag_value="none", help="Never animate output.")
@click.option(
    "--force",
    "-F",
    "animation",
    flag_value="force",
    help="Always animate. Does weird stuff if the output is piped.",
)
@click.version_option(__version__, "--version", "-v", prog_name="duckt", message="%(prog)s %(version)s")
@click.pass_context
def main(
    ctx: click.Context,
    message: str,
    open_mouth: str,
    closed_mouth: str,
    delay_us: int,
    animation: str,
) -> None:
    """duckt - a duck that says MESSAGE.

    \b
    Examples:
      duckt "quack"                  # Animated on a terminal
      duckt -N "quack"               # Print once
      duckt -o "(o)< TEXT" "quack"   # Custom open mouth
    """
    try:
        config = DucktConfig.from_options(
            message=message,
            open_mouth=open_mouth,
            closed_mouth=closed_mouth,
            delay_us=delay_us,
            animation=animation,  # type: ignore[arg-type]
        )
    except TemplateValidationError as e:
        err_console.print(f"[red]Error:[/red] {e}", highlight=False, soft_wrap=True)
        click.echo(ctx.get_help(), err=True)
        ctx.exit(1)

    animator = RevealAnimator(console, config.delay)
    animator.run(
        config.open_mouth,
        config.closed_mouth,
        config.message_bytes,
        animate=config.should_animate(console.is_terminal),
    )
