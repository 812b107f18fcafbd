# ──────────────────────────────────────────────────────────────────────
# PID Ball — Configuration Messages
# © 1998–2026 Miroslav Šotek. All rights reserved.
# Contact: www.anulum.li | protoscience@anulum.li
# ORCID: https://orcid.org/0009-0009-3560-0851
# License: GNU AGPL v3 | Commercial licensing available
# ──────────────────────────────────────────────────────────────────────
"""Live-reconfiguration protocol of the simulation.

Each ``Message`` changes exactly one parameter, or asks for a reset
(state back to initial, tuning kept) or a restart (everything back to the
construction-time defaults).  Messages are immutable and validated when
they are built, so a ``Simulation`` never sees a malformed one.
"""
from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import Optional, Union

Payload = Optional[Union[float, bool]]


class MessageKind(str, enum.Enum):
    KP = "kp"
    KI = "ki"
    KD = "kd"
    TARGET = "target"
    NOISE = "noise"
    GRAVITATION = "gravitation"
    MAX_FORCE = "max_force"
    MAX_FORCE_RATE = "max_force_rate"
    HOLD_BALL = "hold_ball"
    RESET = "reset"
    RESTART = "restart"


_NO_PAYLOAD = frozenset({MessageKind.RESET, MessageKind.RESTART})
_NON_NEGATIVE = frozenset({MessageKind.NOISE, MessageKind.MAX_FORCE, MessageKind.MAX_FORCE_RATE})


@dataclass(frozen=True)
class Message:
    kind: MessageKind
    value: Payload = None

    def __post_init__(self) -> None:
        kind = MessageKind(self.kind)
        object.__setattr__(self, "kind", kind)
        if kind in _NO_PAYLOAD:
            if self.value is not None:
                raise ValueError(f"Message {kind.value!r} takes no payload.")
            return
        if self.value is None:
            raise ValueError(f"Message {kind.value!r} requires a payload.")
        if kind is MessageKind.HOLD_BALL:
            if not isinstance(self.value, bool):
                raise ValueError("Message 'hold_ball' requires a bool payload.")
            return
        if isinstance(self.value, bool):
            raise ValueError(f"Message {kind.value!r} requires a numeric payload.")
        value = float(self.value)
        if math.isnan(value):
            raise ValueError(f"Message {kind.value!r} payload must not be NaN.")
        if kind in _NON_NEGATIVE and value < 0.0:
            raise ValueError(f"Message {kind.value!r} payload must be >= 0, got {value}.")
        object.__setattr__(self, "value", value)

    # Constructors, one per kind.
    @classmethod
    def kp(cls, value: float) -> "Message":
        return cls(MessageKind.KP, value)

    @classmethod
    def ki(cls, value: float) -> "Message":
        return cls(MessageKind.KI, value)

    @classmethod
    def kd(cls, value: float) -> "Message":
        return cls(MessageKind.KD, value)

    @classmethod
    def target(cls, value: float) -> "Message":
        return cls(MessageKind.TARGET, value)

    @classmethod
    def noise(cls, sigma: float) -> "Message":
        return cls(MessageKind.NOISE, sigma)

    @classmethod
    def gravitation(cls, value: float) -> "Message":
        return cls(MessageKind.GRAVITATION, value)

    @classmethod
    def max_force(cls, value: float) -> "Message":
        return cls(MessageKind.MAX_FORCE, value)

    @classmethod
    def max_force_rate(cls, value: float) -> "Message":
        return cls(MessageKind.MAX_FORCE_RATE, value)

    @classmethod
    def hold_ball(cls, hold: bool) -> "Message":
        return cls(MessageKind.HOLD_BALL, hold)

    @classmethod
    def reset(cls) -> "Message":
        return cls(MessageKind.RESET)

    @classmethod
    def restart(cls) -> "Message":
        return cls(MessageKind.RESTART)
