import logging
import sys
from datetime import date
from pathlib import Path

import click

from .chart import transpose_chart
from .chordpro import export_library, export_song, parse_song, split_songs
from .classifier import pair_lines
from .exceptions import CifraError, FetchError
from .importer import import_document
from .library import load_library, save_library
from .models import ChordLine, DirectiveLine, EmptyLine, LyricLine, PairedLine, ParsedLine, Song
from .registry import DEFAULT_CLASSIFIER, classifier_names, get_classifier
from .search import SORT_FIELDS, search_songs, sort_songs
from .sources import read_document
from .titles import display_title
from .transposer import Accidental, resolve_key_signature, transpose_chord

UNKNOWN_ARTIST = "Desconhecido"

_library_option = click.option(
    "--library", "library_path", required=True, metavar="PATH",
    type=click.Path(dir_okay=False, path_type=Path),
    help="JSON library file (created on first import).",
)


def _fail(exc: CifraError) -> None:
    msg = f"Error: {exc}"
    if isinstance(exc, FetchError) and exc.status_code == 0:
        msg = f"Error: Could not connect to {exc.url}"
    click.echo(msg, err=True)
    sys.exit(1)


def _read(location: str) -> str:
    try:
        return read_document(location)
    except CifraError as exc:
        _fail(exc)


def _load(path: Path) -> list[Song]:
    try:
        return load_library(path)
    except CifraError as exc:
        _fail(exc)


def _describe(parsed: ParsedLine) -> str:
    """One ``<type>\\t<text>`` row per classified line."""
    if isinstance(parsed, EmptyLine):
        return "empty\t"
    if isinstance(parsed, DirectiveLine):
        return f"directive\t{parsed.text}"
    if isinstance(parsed, LyricLine):
        return f"lyric\t{parsed.text}"
    if isinstance(parsed, ChordLine):
        return f"chord\t{parsed.text}"
    if isinstance(parsed, PairedLine):
        return f"both\t{parsed.chord_line.text}\n\t{parsed.lyric_line.text}"
    raise TypeError(f"Unhandled line type: {type(parsed).__name__}")


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log debug output to stderr.")
def main(verbose: bool) -> None:
    """Manage chord charts: split, transpose, import and export songs.

    \b
    DOCUMENT arguments accept a file path or an http(s) URL.  Documents use
    {title:}/{artist:}/{key:} directives and separate songs with a "---" line.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("document")
def split(document: str) -> None:
    """List the songs found in DOCUMENT."""
    sections = [s for s in split_songs(_read(document)) if s]
    for i, section in enumerate(sections, start=1):
        song = parse_song(section)
        title = display_title(song.title) or "(untitled)"
        line_count = len(song.body.splitlines())
        click.echo(f"{i}\t{title}\t{line_count} lines")


@main.command()
@click.argument("document")
@click.option("-t", "--transpose", "semitones", default=0, show_default=True,
              help="Semitones to move every chord (negative moves down).")
@click.option("--accidentals", type=click.Choice([a.value for a in Accidental]), default=None,
              help="Spell transposed chords with sharps or flats (default: from the key).")
@click.option("--classifier", "classifier_name", type=click.Choice(classifier_names()),
              default=DEFAULT_CLASSIFIER, show_default=True,
              help="Strategy used to recognise chord lines.")
@click.option("--index", "song_index", default=1, show_default=True,
              help="For multi-song documents, show song N.")
def show(document: str, semitones: int, accidentals: str | None,
         classifier_name: str, song_index: int) -> None:
    """Print a song from DOCUMENT, optionally transposed."""
    sections = [s for s in split_songs(_read(document)) if s]
    if not 1 <= song_index <= len(sections):
        raise click.BadParameter(
            f"document has {len(sections)} song(s)", param_hint="'--index'"
        )
    song = parse_song(sections[song_index - 1])

    if accidentals:
        preference = Accidental(accidentals)
    elif song.key:
        preference = resolve_key_signature(song.key)
    else:
        preference = Accidental.SHARPS

    content = transpose_chart(
        song.body, semitones, preference, classifier=get_classifier(classifier_name)
    )
    key = transpose_chord(song.key, semitones, preference) if song.key else None
    rendered = Song(id="", title=song.title, content=content, artist=song.artist, key=key)
    click.echo(export_song(rendered))


@main.command()
@click.argument("document")
@click.option("--classifier", "classifier_name", type=click.Choice(classifier_names()),
              default=DEFAULT_CLASSIFIER, show_default=True,
              help="Strategy used to recognise chord lines.")
@click.option("--pair", is_flag=True, default=False,
              help="Merge chord lines with the lyric line beneath them.")
def classify(document: str, classifier_name: str, pair: bool) -> None:
    """Show how each line of DOCUMENT is classified."""
    text = _read(document).replace("\r\n", "\n").removeprefix("\ufeff")
    lines = get_classifier(classifier_name).classify_content(text)
    if pair:
        lines = pair_lines(lines)
    for parsed in lines:
        click.echo(_describe(parsed))


@main.command(name="import")
@click.argument("document")
@_library_option
@click.option("--category", default="Louvor", show_default=True,
              help='Title prefix for imported songs, e.g. "Hino" or "Louvor".')
@click.option("--default-artist", default=UNKNOWN_ARTIST, show_default=True,
              help="Artist recorded for songs without an {artist:} directive.")
def import_(document: str, library_path: Path, category: str, default_artist: str) -> None:
    """Import every song in DOCUMENT into the library, skipping duplicates."""
    text = _read(document)
    existing = _load(library_path)

    result = import_document(existing, text, category, default_artist=default_artist)
    if result.imported:
        save_library(library_path, existing + result.songs)

    summary = f"Imported {result.imported} song(s)"
    if result.skipped:
        summary += f", {result.skipped} already in library"
    if result.failed:
        summary += f", {result.failed} failed"
    click.echo(summary)

    if result.failed and not (result.imported or result.skipped):
        click.echo("Error: no songs imported; check the document format", err=True)
        sys.exit(1)


@main.command()
@_library_option
@click.option("-o", "--output", "output_path", default=None, metavar="PATH",
              help="Output file path (default: songs-chordpro-<date>.cho)")
@click.option("--stdout", is_flag=True, default=False,
              help="Print to stdout instead of writing a file.")
def export(library_path: Path, output_path: str | None, stdout: bool) -> None:
    """Export every song in the library as one interchange document."""
    songs = _load(library_path)
    text = export_library(songs)

    if stdout:
        click.echo(text)
        return

    dest = Path(output_path) if output_path else Path(f"songs-chordpro-{date.today().isoformat()}.cho")
    dest.write_text(text + "\n", encoding="utf-8")
    click.echo(f"Exported {len(songs)} song(s) to {dest}")


@main.command()
@click.argument("query")
@_library_option
@click.option("--sort", "sort_by", type=click.Choice(SORT_FIELDS), default="title",
              show_default=True, help="Result order.")
def search(query: str, library_path: Path, sort_by: str) -> None:
    """Find songs whose title, artist or lyrics contain QUERY."""
    matches = sort_songs(search_songs(_load(library_path), query), sort_by)
    for song in matches:
        click.echo(f"{song.id}\t{display_title(song.title)}\t{song.artist or ''}")
    if not matches:
        click.echo("No songs found.", err=True)
