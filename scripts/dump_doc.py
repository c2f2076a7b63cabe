#!/usr/bin/env python
import argparse

from strictpretty import PrettyPrinter, dump_doc


def build_sample(q: PrettyPrinter) -> None:
    with q.group(2, "{", "}"):
        q.breakable()
        for idx, (key, values) in enumerate({"alpha": (1, 2, 3), "beta": (4, 5), "gamma": ()}.items()):
            if idx:
                q.text(",")
                q.breakable()
            q.text(f"{key}: ")
            with q.group(1, "[", "]"):
                for value_idx, value in enumerate(values):
                    if value_idx:
                        q.text(",")
                        q.breakable()
                    q.text(str(value))
        q.breakable()


def main() -> None:
    arg_parser = argparse.ArgumentParser(description="Dump and render a sample document tree.")
    arg_parser.add_argument("--width", type=int, default=20)
    args = arg_parser.parse_args()

    q = PrettyPrinter(maxwidth=args.width)
    build_sample(q)

    for line in dump_doc(q.groups[0]):
        print(line)
    print()

    q.flush()
    print(q.output)


if __name__ == "__main__":
    main()
