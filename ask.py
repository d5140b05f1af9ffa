"""Ask a question about the expenses database from the command line.

Usage examples:

# Uses LLM_BACKEND / LLM_API_BASE and the live database schema
python ask.py "How much did I spend on food this month?"

# Use a saved schema file and a local Transformers model
python ask.py --schema-file schema.json --backend transformers "What was my biggest expense this year?"

Every answered question exits with code 0, including rejected and failed queries.
"""
import argparse
import json
import sys

import config
from nl_to_sql_pipeline import build_default_pipeline


def build_parser():
    parser = argparse.ArgumentParser(description="Answer a question about your expenses using an LLM-generated SQL query")
    parser.add_argument("question", nargs="?", help="Natural language question (read from stdin when omitted)")
    parser.add_argument("--schema-file", default=None, help="Schema JSON/text file instead of live introspection")
    parser.add_argument("--backend", choices=["http", "transformers"], default=None,
                        help="Language model backend (default: LLM_BACKEND or http)")
    parser.add_argument("--show-sql", action="store_true", help="Also print the executed SQL")
    parser.add_argument("--json", action="store_true", help="Print the full outcome as JSON")
    return parser


def main(argv=None, pipeline=None):
    args = build_parser().parse_args(argv)
    config.setup_logging()

    try:
        question = args.question or input("Question: ")
        if pipeline is None:
            pipeline = build_default_pipeline(backend=args.backend, schema_file=args.schema_file)
        outcome = pipeline.run(question)
    except KeyboardInterrupt:
        print("Interrupted by user", file=sys.stderr)
        return 1
    except EOFError:
        print("No question given", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(outcome, indent=2, ensure_ascii=False))
        return 0

    if args.show_sql and outcome["sql"]:
        print(f"SQL: {outcome['sql']}\n")
    print(outcome["answer"])
    return 0


if __name__ == "__main__":
    sys.exit(main())
