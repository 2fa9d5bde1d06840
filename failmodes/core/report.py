# failmodes/core/report.py
"""
DemoRecord: structured outcome of one demonstration.

Every console line is rendered from a record, so text and JSON output stay
in step. The builders below branch exhaustively on the tier they receive.
"""

from __future__ import annotations

from typing import Any, Dict
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from .fault import FaultReport
from .option import Some, is_option
from .result import Ok, is_result


class Tier(str, Enum):
    """
    Which error-handling tier produced the outcome.

    - VALUE: plain value, nothing can go wrong
    - ABSENCE: optional value
    - FAILURE: recoverable failure
    - FAULT: unrecoverable fault
    """
    VALUE = "value"
    ABSENCE = "absence"
    FAILURE = "failure"
    FAULT = "fault"


class Outcome(str, Enum):
    OK = "ok"
    ABSENT = "absent"
    ERR = "err"
    FAULT = "fault"


class DemoRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    demo: str = Field(description="Demonstration name")
    tier: Tier = Field(description="Error-handling tier")
    outcome: Outcome = Field(description="ok / absent / err / fault")
    rendered: str = Field(description="Human-readable rendering")
    details: Dict[str, Any] = Field(default_factory=dict)

    def line(self) -> str:
        return f"{self.demo}: {self.rendered}"

    def to_json(self) -> str:
        return self.model_dump_json()


def record_value(demo: str, value: Any) -> DemoRecord:
    return DemoRecord(demo=demo, tier=Tier.VALUE, outcome=Outcome.OK, rendered=repr(value))


def record_option(demo: str, option: Any) -> DemoRecord:
    if not is_option(option):
        raise TypeError(f"{demo}: expected an Option, got {type(option).__name__}")
    if isinstance(option, Some):
        return DemoRecord(
            demo=demo,
            tier=Tier.ABSENCE,
            outcome=Outcome.OK,
            rendered=repr(option),
            details={"value": option.value},
        )
    return DemoRecord(demo=demo, tier=Tier.ABSENCE, outcome=Outcome.ABSENT, rendered=repr(option))


def record_result(demo: str, result: Any) -> DemoRecord:
    if not is_result(result):
        raise TypeError(f"{demo}: expected a Result, got {type(result).__name__}")
    if isinstance(result, Ok):
        return DemoRecord(
            demo=demo,
            tier=Tier.FAILURE,
            outcome=Outcome.OK,
            rendered=repr(result),
            details={"value": result.value},
        )
    return DemoRecord(
        demo=demo,
        tier=Tier.FAILURE,
        outcome=Outcome.ERR,
        rendered=repr(result),
        details=result.cause.to_dict(),
    )


def record_fault(demo: str, report: FaultReport) -> DemoRecord:
    return DemoRecord(
        demo=demo,
        tier=Tier.FAULT,
        outcome=Outcome.FAULT,
        rendered=report.summary().replace("\n", " "),
        details=report.to_dict(),
    )
