# src/senti_lab/demo.py
import argparse
import json
import sys

from .analysis import (
    Sentiment,
    UnknownSentimentError,
    analyze_sentiment,
    build_finder_round,
    build_sentence_round,
    find_feeling_words,
    generate_example,
    get_lexicon,
    get_fun_fact,
    get_random_words,
    suggest_words,
)
from .analysis.token import tokenize
from .utils.log import debug, enable_topics


def _category(value: str) -> Sentiment:
    try:
        return Sentiment.parse(value.strip().lower())
    except UnknownSentimentError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def _cmd_analyze(args: argparse.Namespace) -> int:
    text = " ".join(args.text) or "I love playing with my friends!"
    result = analyze_sentiment(text)
    out = result.to_dict()
    if args.hints:
        lex = get_lexicon()
        hints = {}
        for tok in tokenize(text):
            if lex.lookup(tok.normalized) is None:
                close = [s.word for s in suggest_words(tok.original, lexicon=lex)]
                if close:
                    hints[tok.original] = close
        out["hints"] = hints
    print(json.dumps(out, indent=2, ensure_ascii=False))
    return 0


def _cmd_words(args: argparse.Namespace) -> int:
    for word in get_random_words(args.category, args.count):
        print(word)
    return 0


def _cmd_fact(args: argparse.Namespace) -> int:
    print(get_fun_fact(args.category))
    return 0


def _cmd_example(args: argparse.Namespace) -> int:
    print(generate_example(args.category))
    return 0


def _cmd_find(args: argparse.Namespace) -> int:
    if args.sentence:
        sentence = " ".join(args.sentence)
        words = find_feeling_words(sentence)
    else:
        sentence, words = build_finder_round()
    found = [
        {"word": fw.word, "sentiment": fw.sentiment.value if fw.sentiment else None,
         "is_feeling": fw.is_feeling}
        for fw in words
    ]
    print(json.dumps({"sentence": sentence, "words": found}, indent=2, ensure_ascii=False))
    return 0


def _cmd_build(args: argparse.Namespace) -> int:
    print(json.dumps(build_sentence_round()._asdict(), indent=2, ensure_ascii=False))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="senti-lab",
        description="Kids' sentiment lab: classify text, draw practice words and fun facts.",
    )
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("analyze", help="Classify a sentence")
    p.add_argument("text", nargs="*", help="Text to analyze (e.g. I love and adore this)")
    p.add_argument("--hints", action="store_true", help="Suggest spellings for unmatched words")
    p.set_defaults(func=_cmd_analyze)

    p = sub.add_parser("words", help="Draw random words from a category")
    p.add_argument("category", type=_category)
    p.add_argument("--count", type=int, default=3)
    p.set_defaults(func=_cmd_words)

    p = sub.add_parser("fact", help="Print a fun fact for a category")
    p.add_argument("category", type=_category)
    p.set_defaults(func=_cmd_fact)

    p = sub.add_parser("example", help="Generate an example sentence for a category")
    p.add_argument("category", type=_category)
    p.set_defaults(func=_cmd_example)

    p = sub.add_parser("find", help="Mark the feeling words of a sentence")
    p.add_argument("sentence", nargs="*", help="Sentence to check (random pool sentence if omitted)")
    p.set_defaults(func=_cmd_find)

    p = sub.add_parser("build", help="Deal a sentence-building round")
    p.set_defaults(func=_cmd_build)
    return parser


def main(argv=None):
    """CLI demo: analyze text, draw practice words, fun facts and example sentences."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.debug:
        enable_topics("all")
    debug(f"command={args.command}", topic="cli")

    try:
        return args.func(args)
    except ValueError as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
