# failmodes/cli/demo_cmd.py
"""Commands for the absence and recoverable-failure demonstrations."""

from __future__ import annotations

from typing import List
import sys

from failmodes.config import FailModesConfig
from failmodes.core.report import DemoRecord, record_option, record_result, record_value
from failmodes.demos import (
    find_char,
    forward_failure,
    parse_demo_input,
    sum_unsigned,
    with_asset,
    without_asset,
)
from .output import emit


def owner_records() -> List[DemoRecord]:
    return [
        record_value("with_asset", with_asset()),
        record_value("without_asset", without_asset()),
    ]


def search_record(text: str, ch: str) -> DemoRecord:
    return record_option(f"find_char({text!r}, {ch!r})", find_char(text, ch))


def parse_record(texts: List[str], bits: int) -> DemoRecord:
    if len(texts) == 1:
        return record_result(f"parse({texts[0]!r})", parse_demo_input(texts[0], bits))
    label = ", ".join(repr(t) for t in texts)
    return record_result(f"sum({label})", sum_unsigned(*texts, bits=bits))


def run_all(args, config: FailModesConfig) -> int:
    """Owner, search and parse demonstrations in sequence."""
    demo = config.demo
    records = owner_records()
    records.append(search_record(demo.search_text, demo.search_char))
    records.append(parse_record([demo.parse_input], demo.int_bits))
    emit(records, args.json)
    return 0


def run_owner(args, config: FailModesConfig) -> int:
    emit(owner_records(), args.json)
    return 0


def run_search(args, config: FailModesConfig) -> int:
    text = config.demo.search_text if args.text is None else args.text
    ch = config.demo.search_char if args.char is None else args.char
    if len(ch) != 1:
        print(f"failmodes search: CHAR must be a single character, got {ch!r}", file=sys.stderr)
        return 2
    emit([search_record(text, ch)], args.json)
    return 0


def run_parse(args, config: FailModesConfig) -> int:
    # A failed parse is a handled outcome, so the exit status stays 0.
    texts = list(args.texts) or [config.demo.parse_input]
    emit([parse_record(texts, config.demo.int_bits)], args.json)
    return 0


def run_forward(args, config: FailModesConfig) -> int:
    emit([record_result("forward_failure", forward_failure())], args.json)
    return 0
