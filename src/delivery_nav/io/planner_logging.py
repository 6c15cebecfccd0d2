# io/planner_logging.py
import json
import logging
import sys

from delivery_nav.app.protocols import NoopHooks


def default_json_logger(name="delivery_nav", level="INFO", stream=None):
    logger = logging.getLogger(name)
    if not logger.handlers:
        # stdout carries the command stream
        h = logging.StreamHandler(stream or sys.stderr)

        class _JsonFormatter(logging.Formatter):
            def format(self, record: logging.LogRecord) -> str:
                payload = {
                    "level": record.levelname,
                    "msg": record.getMessage(),
                    "logger": record.name,
                }
                extra = getattr(record, "extra", None)
                if isinstance(extra, dict):
                    payload.update(extra)
                return json.dumps(payload)

        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
    logger.setLevel(level)
    return logger


class PlannerLogging(NoopHooks):
    """
    Structured logs for a planning run. Per-leg records only in debug mode.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        logger: logging.Logger | None = None,
    ):
        self.run_id, self.debug = run_id, debug
        self.log = logger or default_json_logger(level=level)

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id, **extra}
        self.log.log(getattr(logging, level), msg, extra={"extra": payload})

    def plan_start(self, *, depot, n_deliveries):
        self._emit("INFO", "plan_start", depot=depot, n_deliveries=n_deliveries)

    def optimized(self, *, old_crow_miles, new_crow_miles):
        level = "WARNING" if new_crow_miles > old_crow_miles else "INFO"
        self._emit(
            level, "optimized", old_crow_miles=old_crow_miles, new_crow_miles=new_crow_miles
        )

    def leg_routed(self, *, leg, start, end, status, hops, miles):
        if self.debug:
            self._emit(
                "DEBUG",
                "leg_routed",
                leg=leg,
                start=start,
                end=end,
                status=status,
                hops=hops,
                miles=miles,
            )

    def plan_end(self, *, status, commands, total_miles):
        self._emit("INFO", "plan_end", status=status, commands=commands, total_miles=total_miles)

    def error(self, *, reason: str, **kw):
        self._emit("ERROR", "plan_error", reason=reason, **kw)
