# minievm/src/minievm/cli/main.py
import click
import logging
import sys
from pathlib import Path
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..vm import DEFAULT_MEMORY_LIMIT, VM, VMError, disassemble, format_listing, load_code

console = Console()

MEMORY_ROW = 32


def _read_program(code, file, binary):
    """Resolve the program from the CODE argument or --file"""
    if code is not None and file:
        raise click.UsageError("Pass either CODE or --file, not both")
    if file:
        data = Path(file).read_bytes()
        return data if binary else load_code(data.decode("ascii", errors="replace"))
    if code is not None:
        return load_code(code)
    raise click.UsageError("No program given (pass CODE or --file)")


def _stack_table(stack):
    table = Table(title="Stack (top first)")
    table.add_column("#", style="yellow", justify="right")
    table.add_column("Hex", style="cyan")
    table.add_column("Decimal", style="green")
    for depth, value in enumerate(reversed(stack)):
        table.add_row(str(depth), f"0x{value:x}", str(value))
    return table


def _memory_dump(memory):
    if not memory:
        return "(empty)"
    rows = []
    for offset in range(0, len(memory), MEMORY_ROW):
        rows.append(f"{offset:04x}: {memory[offset:offset + MEMORY_ROW].hex()}")
    return "\n".join(rows)


@click.group()
@click.version_option(version="0.1.0", prog_name="minievm")
@click.option('--debug', is_flag=True, help="Log every executed instruction")
def cli(debug):
    """minievm - run raw 256-bit stack machine bytecode"""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@cli.command()
@click.argument('code', required=False)
@click.option('--file', '-f', type=click.Path(exists=True, dir_okay=False), help="Read the program from a file")
@click.option('--binary', is_flag=True, help="Treat --file as raw bytes instead of hex text")
@click.option('--strict', is_flag=True, help="Fail on unrecognised opcodes")
@click.option('--step-limit', type=click.IntRange(min=0), default=None, help="Maximum instructions to execute")
@click.option('--memory-limit', type=click.IntRange(min=0), default=DEFAULT_MEMORY_LIMIT, show_default=True, help="Maximum memory size in bytes")
@click.option('--unbounded-memory', is_flag=True, help="Let memory grow without a cap")
@click.option('--max-stack-depth', type=click.IntRange(min=0), default=None, help="Stack depth cap (1024 for EVM behaviour)")
def run(code, file, binary, strict, step_limit, memory_limit, unbounded_memory, max_stack_depth):
    """Run a hex program and show the final stack and memory"""
    options = {
        'strict': strict,
        'step_limit': step_limit,
        'max_stack_depth': max_stack_depth,
        'memory_limit': None if unbounded_memory else memory_limit,
    }
    try:
        program = _read_program(code, file, binary)
        result = VM(program, **options).run()
    except (VMError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        sys.exit(1)

    console.print(_stack_table(result.stack))
    console.print(Panel.fit(
        _memory_dump(result.memory),
        title=f"[bold blue]Memory ({len(result.memory)} bytes)[/bold blue]",
        border_style="blue"
    ))
    console.print(f"[bold green]Halted[/bold green] at pc={result.pc} after {result.steps} steps")


@cli.command()
@click.argument('code', required=False)
@click.option('--file', '-f', type=click.Path(exists=True, dir_okay=False), help="Read the program from a file")
@click.option('--binary', is_flag=True, help="Treat --file as raw bytes instead of hex text")
def disasm(code, file, binary):
    """Show the instruction listing of a hex program"""
    try:
        program = _read_program(code, file, binary)
    except ValueError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        sys.exit(1)

    listing = format_listing(disassemble(program))
    console.print(escape(listing) if listing else "(empty program)")


if __name__ == "__main__":
    cli()
