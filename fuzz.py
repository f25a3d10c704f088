#!/usr/bin/env python3
"""
Random fuzzer for the LaxHTML parser.
Generates invalid/malformed markup and checks that parsing never raises and
that the resulting tree keeps its structural guarantees.
"""

import argparse
import random
import sys
import time
import traceback

from laxhtml import LaxHTML, Node

TAGS = ["div", "span", "p", "a", "b", "ul", "li", "table", "td", "DIV", "Li", "style", "STYLE"]

VOID_TAGS = ["br", "img", "hr", "input", "meta", "basefont", "isindex", "BR"]

WORDS = ["x", "item", "Hello", "a{color:red}", "id", "42", "--", "/", "=", "'", '"']

ENTITIES = ["&amp;", "&lt;", "&amp", "&copy=", "&ampx", "&#65", "&#x110000;", "&unknown;", "&"]

# Attribute interiors aimed at the quirks of the pair extractor
ATTRIBUTE_FRAGMENTS = [
    "id=x",
    "ID=Mixed",
    'title="two words"',
    "title='single'",
    "disabled",
    "disabled hidden",
    "=x",
    "==x",
    "a = b",
    'a="1"b="2"',
    'title="unterminated',
    "a=1 a=2",
    "href=&amp;&lt;",
    "x=&copy=2",
]

TAG_ENDINGS = [">", ">", ">", "/>", " />", "//>", " >", ""]

DEGENERATE_MARKUP = ["<>", "</>", "< p>", "<", "<<p>", "a < b > c", "<p<b>", "<!", "<!-", "<!--"]


def fuzz_whitespace():
    return "".join(random.choices([" ", "\t", "\n", ""], k=random.randint(0, 3)))


def fuzz_open_tag():
    """Opening tag with zero or more attribute fragments and a random ending."""
    tag = random.choice(TAGS + VOID_TAGS)
    attrs = "".join(" " + random.choice(ATTRIBUTE_FRAGMENTS) for _ in range(random.randint(0, 3)))
    ending = random.choice(TAG_ENDINGS)
    return f"<{tag}{attrs}{fuzz_whitespace()}{ending}"


def fuzz_close_tag():
    """Closing tag: matching, stray, void, spaced or carrying attributes."""
    tag = random.choice(TAGS + VOID_TAGS + ["nosuch"])
    variants = [
        f"</{tag}>",
        f"</{tag.upper()}>",
        f"</{tag} >",
        f"</ {tag}>",
        f"</{tag} id=x>",
        f"</{tag}",
    ]
    return random.choices(variants, weights=[10, 3, 2, 1, 1, 1])[0]


def fuzz_comment():
    content = random.choice(WORDS) + fuzz_whitespace()
    variants = [
        f"<!--{content}-->",
        f"<!-- <p>{content}</p> -->",
        f"<!--{content}",
        "<!---->",
        "<!-->",
        f"<!-{content}>",
    ]
    return random.choice(variants)


def fuzz_declaration():
    return random.choice(["<!DOCTYPE html>", "<!doctype html>", "<!DOCTYPE html", "<!>", "<![CDATA[x]]>"])


def fuzz_style():
    """Style element, sometimes unterminated or with markup inside."""
    css = random.choice(["a{color:red}", "</p><b>", "</sty", "", "<!-- -->"])
    endings = ["</style>", "</STYLE>", "</Style>", "</style >", ""]
    ending = random.choices(endings, weights=[10, 3, 3, 1, 1])[0]
    return f"<style{random.choice(['', ' type=text/css', '/'])}>{css}{ending}"


def fuzz_text():
    strategies = [
        lambda: random.choice(WORDS),
        fuzz_whitespace,
        lambda: random.choice(ENTITIES),
        lambda: random.choice(DEGENERATE_MARKUP),
    ]
    return random.choice(strategies)()


def fuzz_nested_structure(depth=0, max_depth=8):
    """Nested elements whose end tags are sometimes missing or mismatched."""
    if depth >= max_depth or random.random() < 0.3:
        return fuzz_text()
    tag = random.choice(TAGS)
    inner = "".join(fuzz_nested_structure(depth + 1, max_depth) for _ in range(random.randint(0, 3)))
    closing = random.choice([f"</{tag}>", f"</{tag}>", f"</{random.choice(TAGS)}>", ""])
    return f"<{tag}>{inner}{closing}"


def generate_fuzzed_html():
    """Generate a complete fuzzed document."""
    parts = []
    if random.random() < 0.5:
        parts.append(fuzz_declaration())

    for _ in range(random.randint(1, 20)):
        element_type = random.choices(
            [
                fuzz_open_tag,
                fuzz_close_tag,
                fuzz_comment,
                fuzz_declaration,
                fuzz_style,
                fuzz_text,
                fuzz_nested_structure,
            ],
            weights=[20, 10, 6, 2, 4, 15, 8],
        )[0]
        parts.append(element_type())
    return "".join(parts)


def check_tree(root):
    """Return a list of structural problems in a parsed tree (empty if fine)."""
    problems = []
    if not isinstance(root, Node) or root.parent is not None or root.tag is not None:
        return ["root is not a parentless, tagless Node"]
    for node in root.iter_descendants():
        if node.is_text and node.children:
            problems.append(f"text node with children: {node!r}")
        if node.is_void and node.children:
            problems.append(f"void element with children: {node!r}")
        if node not in node.parent.children:
            problems.append(f"node missing from its parent's children: {node!r}")
    return problems


def run_fuzzer(num_tests, seed=None, verbose=False, save_failures=False):
    """Run the fuzzer against LaxHTML. Returns True when nothing failed."""
    if seed is not None:
        random.seed(seed)

    crashes = []
    broken = []
    hangs = []
    successes = 0

    print(f"Fuzzing laxhtml with {num_tests} test cases...")
    start_time = time.time()

    for i in range(num_tests):
        html = generate_fuzzed_html()

        if verbose and i % 100 == 0:
            print(f"  Test {i}/{num_tests}...")

        try:
            start = time.perf_counter()
            doc = LaxHTML(html, collect_errors=True)
            elapsed = time.perf_counter() - start
        except Exception as e:  # noqa: BLE001 - any exception is a fuzz finding
            crashes.append({
                "test_num": i,
                "html": html,
                "error": str(e),
                "traceback": traceback.format_exc(),
            })
            if verbose:
                print(f"  CRASH: Test {i}: {e}")
            continue

        problems = check_tree(doc.root)
        if problems:
            broken.append({"test_num": i, "html": html, "problems": problems})
            if verbose:
                print(f"  BROKEN: Test {i}: {problems[0]}")
        elif elapsed > 5.0:
            hangs.append({"test_num": i, "html": html, "time": elapsed})
            if verbose:
                print(f"  HANG: Test {i} took {elapsed:.2f}s")
        else:
            successes += 1

    elapsed_total = max(time.time() - start_time, 1e-9)

    print(f"\n{'=' * 60}")
    print("FUZZING RESULTS: laxhtml")
    print(f"{'=' * 60}")
    print(f"Total tests:    {num_tests}")
    print(f"Successes:      {successes}")
    print(f"Crashes:        {len(crashes)}")
    print(f"Broken trees:   {len(broken)}")
    print(f"Hangs (>5s):    {len(hangs)}")
    print(f"Total time:     {elapsed_total:.2f}s")
    print(f"Tests/second:   {num_tests / elapsed_total:.1f}")

    for crash in crashes[:10]:
        print(f"\nTest #{crash['test_num']}:")
        print(f"  HTML: {crash['html'][:200]!r}...")
        print(f"  Error: {crash['error']}")
    for item in broken[:10]:
        print(f"\nTest #{item['test_num']}:")
        print(f"  HTML: {item['html'][:200]!r}...")
        print(f"  Problem: {item['problems'][0]}")

    if save_failures and (crashes or broken or hangs):
        filename = f"fuzz_failures_laxhtml_{int(time.time())}.txt"
        with open(filename, "w") as f:
            f.write(f"Seed: {seed}\n\n")
            for crash in crashes:
                f.write(f"=== CRASH #{crash['test_num']} ===\n")
                f.write(f"HTML:\n{crash['html']}\n")
                f.write(f"Traceback:\n{crash['traceback']}\n\n")
            for item in broken:
                f.write(f"=== BROKEN #{item['test_num']} ===\n")
                f.write(f"HTML:\n{item['html']}\n")
                f.write("\n".join(item["problems"]) + "\n\n")
            for hang in hangs:
                f.write(f"=== HANG #{hang['test_num']} ({hang['time']:.2f}s) ===\n")
                f.write(f"HTML:\n{hang['html']}\n\n")
        print(f"\nFailures saved to {filename}")

    return not crashes and not broken and not hangs


def main():
    parser = argparse.ArgumentParser(description="Fuzz the LaxHTML parser with malformed input")
    parser.add_argument(
        "--num-tests", "-n",
        type=int,
        default=1000,
        help="Number of test cases to generate (default: 1000)",
    )
    parser.add_argument(
        "--seed", "-s",
        type=int,
        default=None,
        help="Random seed for reproducibility",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output",
    )
    parser.add_argument(
        "--save-failures",
        action="store_true",
        help="Save failures to a file",
    )
    parser.add_argument(
        "--sample",
        type=int,
        metavar="N",
        help="Just print N sample fuzzed documents (no parsing)",
    )

    args = parser.parse_args()

    if args.sample:
        if args.seed is not None:
            random.seed(args.seed)
        for i in range(args.sample):
            print(f"=== Sample {i + 1} ===")
            print(generate_fuzzed_html())
            print()
        return

    success = run_fuzzer(
        args.num_tests,
        seed=args.seed,
        verbose=args.verbose,
        save_failures=args.save_failures,
    )
    sys.exit(0 if success else 1)


if __name__ == "__main__":
    main()
