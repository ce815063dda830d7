import argparse
import asyncio
import logging
import sys

from hsk.config import (
    VOCABULARY_SOURCE, VOCABULARY_API_URL, REQUEST_TIMEOUT, STATIC_LOAD_DELAY, DATABASE_URL,
)
from hsk.controller import LoadStatus, ViewController
from hsk.source import SOURCE_KINDS, create_source

# Enable logging
logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=logging.INFO
)
logger = logging.getLogger(__name__)

HELP_TEXT = (
    "Type a word, pinyin or translation to search (empty line shows everything).\n"
    "Commands: /export [dir]  /reload  /quit"
)


def format_entry(entry) -> str:
    word_class = f" [{entry.word_class}]" if entry.word_class else ""
    translation = entry.translation.replace("\n", " / ")
    return f"{entry.id:>4}  {entry.character}  {entry.pinyin}{word_class}  {translation}"


def render(controller: ViewController, out=sys.stdout):
    """Print the current state of the view."""
    if controller.status == LoadStatus.LOADING:
        print("Loading vocabulary...", file=out)
        return
    if controller.status == LoadStatus.FAILED:
        print(f"Error: {controller.error}", file=out)
        return

    words = controller.filtered
    if not words:
        print(f'No vocabulary found for "{controller.query}".', file=out)
        print("Try a different search term.", file=out)
        return

    for entry in words:
        print(format_entry(entry), file=out)
    print(f"-- {len(words)} of {len(controller.entries)} words", file=out)


def export(controller: ViewController, directory: str, out=sys.stdout) -> bool:
    result = controller.export_current_view()
    if not result.ok:
        print(result.notice, file=out)
        return False
    path = result.download.save(directory)
    print(f"Saved {path}", file=out)
    return True


def interactive(controller: ViewController, read=input, out=sys.stdout):
    """Search loop: every line becomes the new query."""
    print(HELP_TEXT, file=out)
    while True:
        try:
            line = read("search> ")
        except EOFError:
            break

        if line.startswith("/"):
            command, _, argument = line.partition(" ")
            if command == "/quit":
                break
            elif command == "/export":
                export(controller, argument.strip() or ".", out)
            elif command == "/reload":
                print("Loading vocabulary...", file=out)
                asyncio.run(controller.load())
                render(controller, out)
            else:
                print(HELP_TEXT, file=out)
            continue

        controller.set_query(line)
        render(controller, out)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Browse, search and export the HSK 1 vocabulary.")
    parser.add_argument("--source", choices=SOURCE_KINDS, default=VOCABULARY_SOURCE,
                        help="where to load the vocabulary from (default: %(default)s)")
    parser.add_argument("--url", default=VOCABULARY_API_URL, help="read endpoint for the remote source")
    parser.add_argument("-q", "--query", default="", help="search term")
    parser.add_argument("--export", metavar="DIR", help="save the filtered list as HSK1_Vocabulary.csv in DIR")
    parser.add_argument("-i", "--interactive", action="store_true", help="search interactively")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    source = create_source(
        args.source,
        api_url=args.url,
        timeout=REQUEST_TIMEOUT,
        delay=STATIC_LOAD_DELAY,
        dsn=DATABASE_URL,
    )
    controller = ViewController(source)

    print("Loading vocabulary...")
    asyncio.run(controller.load())
    if controller.status == LoadStatus.FAILED:
        print(f"Error: {controller.error}")
        return 1

    controller.set_query(args.query)

    if args.interactive:
        interactive(controller)
        return 0

    render(controller)
    if args.export:
        export(controller, args.export)
    return 0


if __name__ == "__main__":
    sys.exit(main())
