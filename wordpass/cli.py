import logging
from typing import Optional
import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table
from wordpass.config import GeneratorSettings
from wordpass.errors import WordpassError
from wordpass.generator.engine import PassphraseGenerator
from wordpass.storage.json_store import JsonStorage
from wordpass.words.defaults import load_words_file

app = typer.Typer(help="wordpass: memorable passphrases from a word dictionary.")
console = Console()

@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging")):
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True))]
        )

def _build_generator(dictionary_file: Optional[str], settings: GeneratorSettings) -> PassphraseGenerator:
    path = dictionary_file or settings.dictionary_file
    if path:
        return PassphraseGenerator(load_words_file(path))
    return PassphraseGenerator()

def _fail(error: Exception):
    console.print(f"[red]Error: {escape(str(error))}[/red]")
    raise typer.Exit(code=1)

@app.command()
def generate(
    words: Optional[int] = typer.Option(None, "--words", "-w", help="Words per passphrase"),
    separator: Optional[str] = typer.Option(None, "--separator", "-s", help="Text placed between words"),
    symbols: Optional[bool] = typer.Option(None, "--symbols/--no-symbols", help="Swap some letters for look-alike symbols"),
    count: int = typer.Option(1, "--count", "-n", help="Number of passphrases"),
    dictionary_file: Optional[str] = typer.Option(None, help="JSON word list to draw from")
):
    """
    Prints one or more passphrases.
    """
    try:
        settings = GeneratorSettings.from_env()
        generator = _build_generator(dictionary_file, settings)
        passphrases = generator.generate_many(
            count,
            word_count=words if words is not None else settings.word_count,
            separator=separator if separator is not None else settings.separator,
            random_symbol_swap=symbols if symbols is not None else settings.symbol_swap
        )
    except (WordpassError, ValidationError) as e:
        _fail(e)

    for passphrase in passphrases:
        # markup off so passphrase symbols like [ are printed as-is
        console.print(passphrase, markup=False, highlight=False)

@app.command()
def stats(dictionary_file: Optional[str] = typer.Option(None, help="JSON word list to inspect")):
    """
    Shows the size and word lengths of a dictionary.
    """
    try:
        settings = GeneratorSettings.from_env()
        dictionary = _build_generator(dictionary_file, settings).dictionary
        shortest = dictionary.get_min_word_length()
        longest = dictionary.get_max_word_length()
    except (WordpassError, ValidationError) as e:
        _fail(e)

    console.print(f"Words: [bold]{len(dictionary)}[/bold]  Shortest: {shortest}  Longest: {longest}")

    table = Table(title="Words by length")
    table.add_column("Length", justify="right")
    table.add_column("Words", justify="right", style="cyan")
    for length, total in dictionary.lengths().items():
        table.add_row(str(length), str(total))
    console.print(table)

@app.command()
def export(
    name: str = typer.Argument(..., help="Name to store the dictionary under"),
    dictionary_file: Optional[str] = typer.Option(None, help="JSON word list to export"),
    storage_dir: Optional[str] = typer.Option(None, help="Directory for stored dictionaries")
):
    """
    Saves a dictionary, statistics included, for later restoring.
    """
    try:
        settings = GeneratorSettings.from_env()
        storage = JsonStorage(storage_dir or settings.storage_dir)
        dictionary = _build_generator(dictionary_file, settings).dictionary
        path = storage.save_dictionary(name, dictionary.get_dictionary())
    except (WordpassError, ValidationError) as e:
        _fail(e)

    console.print(f"[green]Saved {len(dictionary)} words to {path}[/green]")

if __name__ == "__main__":
    app()
