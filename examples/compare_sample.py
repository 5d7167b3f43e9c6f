"""
Compare the two sample documents and print both canonical texts with the
differences marked in the gutter.

Run this with:
    python examples/compare_sample.py
"""

import json

from semjson import Side, compare
from semjson.core.canon import iter_lines

LEFT = """{"Aidan Gillen": {"array": ["Game of Thron\\"es","The Wire"],"string": "some string",
"int": 2,"aboolean": true, "boolean": true,"object": {"foo": "bar","object1": {"new prop1":
"new prop value"},"object2": {"new prop1": "new prop value"},"object3": {"new prop1":
"new prop value"},"object4": {"new prop1": "new prop value"}}},"Amy Ryan": {"one":
"In Treatment","two": "The Wire"},"Annie Fitzgerald": ["Big Love","True Blood"],
"Anwan Glover": ["Treme","The Wire"],"Alexander Skarsgard": ["Generation Kill","True Blood"],
"Clarke Peters": null}"""

RIGHT = """{"Aidan Gillen": {"array": ["Game of Thrones","The Wire"],"string": "some string",
"int": "2","otherint": 4, "aboolean": "true", "boolean": false,"object": {"foo": "bar"}},
"Amy Ryan": ["In Treatment","The Wire"],"Annie Fitzgerald": ["True Blood","Big Love",
"The Sopranos","Oz"],"Anwan Glover": ["Treme","The Wire"],"Alexander Skarsg?rd":
["Generation Kill","True Blood"],"Alice Farmer": ["The Corner","Oz","The Wire"]}"""


def show(title: str, text: str, marked: set) -> None:
    print(f"--- {title}")
    for number, line in iter_lines(text):
        flag = ">" if number in marked else " "
        print(f"{flag}{number:>3}. {line}")
    print()


def main() -> None:
    result = compare(json.loads(LEFT), json.loads(RIGHT))

    show("left", result.left.text, {d.left_line for d in result.differences})
    show("right", result.right.text, {d.right_line for d in result.differences})

    print(result.summary())
    for d in result.differences:
        print(f"  L{d.left_line:<3} R{d.right_line:<3} [{d.kind.value}] {d.message}")

    # Everything reported against the left line of the first difference
    if result.differences:
        first = result.differences[0]
        print(f"\nDifferences on left line {first.left_line}:")
        for d in result.at_line(first.left_line, Side.LEFT):
            print(f"  {d.left.path} -> {d.right.path}: {d.message}")


if __name__ == "__main__":
    main()
