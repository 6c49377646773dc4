import argparse
import sys
from dataclasses import replace
from pathlib import Path

from app.extract_text import extract_text
from pipelines.summarizer import DocumentSummarizer
from utils.config import DEFAULT_NUM_SENTENCES, SummarizerConfig
from utils.logging import setup_logger


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Summarize a .pdf, .docx or .txt document.")
    p.add_argument("path", type=Path, help="document to summarize")
    p.add_argument("-n", "--num-sentences", type=int, default=DEFAULT_NUM_SENTENCES,
                   help="minimum sentence count for the local summarizer")
    p.add_argument("--out", type=Path, help="directory for summary_output.txt + key_points.txt")
    p.add_argument("--local-only", action="store_true", help="ignore HUGGINGFACE_API_KEY")
    return p


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logger()

    if not args.path.is_file():
        print(f"[ERROR] No such file: {args.path}", file=sys.stderr)
        return 2

    config = SummarizerConfig.from_env()
    if args.local_only:
        config = replace(config, api_key=None)

    try:
        text = extract_text(args.path)
    except ValueError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 2
    except Exception as e:
        print(f"[ERROR] Failed to extract text from {args.path}: {e}", file=sys.stderr)
        return 2

    result = DocumentSummarizer(config).summarize(text, args.num_sentences)

    print(result.summary)
    if result.key_points:
        print()
        print("Key points:")
        for point in result.key_points:
            print(f"- {point}")

    if args.out:
        args.out.mkdir(parents=True, exist_ok=True)
        (args.out / "summary_output.txt").write_text(result.summary, encoding="utf-8")
        (args.out / "key_points.txt").write_text("\n".join(result.key_points), encoding="utf-8")
        print("Done. Wrote summary_output.txt + key_points.txt to", args.out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
