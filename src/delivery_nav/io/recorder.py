# io/recorder.py
import json
import logging
import sys
from dataclasses import asdict
from typing import Protocol

from delivery_nav.domain.entities.delivery import Command, Proceed
from delivery_nav.domain.geometry import KM_PER_MILE

log = logging.getLogger(__name__)


class Sink(Protocol):
    def write(self, cmd: Command) -> None: ...


def command_record(cmd: Command, units: str = "miles") -> dict:
    rec = asdict(cmd)
    if isinstance(cmd, Proceed):
        miles = rec.pop("distance_miles")
        rec["distance"] = miles * KM_PER_MILE if units == "km" else miles
        rec["units"] = units
    return rec


class JsonlSink:
    def __init__(self, fp=None, units: str = "miles"):
        self.fp, self.units = fp, units

    def write(self, cmd: Command) -> None:
        # sys.stdout is looked up per write
        (self.fp or sys.stdout).write(json.dumps(command_record(cmd, self.units)) + "\n")


class MemorySink:
    def __init__(self):
        self.commands: list[Command] = []

    def write(self, cmd: Command) -> None:
        self.commands.append(cmd)


class Recorder:
    def __init__(self, *sinks: Sink):
        self.sinks = sinks or (JsonlSink(),)

    def emit(self, cmd: Command) -> None:
        for s in self.sinks:
            try:
                s.write(cmd)
            except Exception:
                # a broken sink must not lose the plan
                log.exception("sink %s failed", type(s).__name__)

    def emit_all(self, commands) -> int:
        n = 0
        for cmd in commands:
            self.emit(cmd)
            n += 1
        return n
