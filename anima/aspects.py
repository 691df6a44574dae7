"""
Soul Aspects — Hun and Po personality weighting.

Agents carry two families of soul aspects, produced by an external
composition subsystem and consumed here read-only:

  - Hun (ethereal): transcendent, moral and reflective tendencies. They lift
    the emotional set point and bias choices toward principled, long-term
    options.
  - Po (corporeal): survival, appetite and aggression. They amplify primal
    feelings that are already present and bias choices toward safety,
    pleasure or confrontation.

Aspect names arrive as free text ("Zheng Zhong (正中)", "zheng_zhong", "正中").
They are resolved once, at ingestion, to an enum member; every effect below is
looked up by that member. Names that resolve to nothing are dropped.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Iterable, Optional, Sequence, Union

import structlog

from anima.affect.state import EmotionDynamicsState
from anima.types import DecisionOption, SoulAspect

logger = structlog.get_logger(__name__)


class HunAspect(str, Enum):
    """The seven Hun (ethereal souls)."""
    TAI_GUANG = "tai_guang"       # Great Light: spiritual peace
    SHUANG_LING = "shuang_ling"   # Clear Spirit: calm alertness
    YOU_JING = "you_jing"         # Dark Essence: mysterious awe
    TONG_MING = "tong_ming"       # Penetrating Brightness: insight
    ZHENG_ZHONG = "zheng_zhong"   # Upright Center: moral feeling
    LING_HUI = "ling_hui"         # Spiritual Intelligence: wisdom
    TIAN_CHONG = "tian_chong"     # Heaven Rush: transcendence


class PoAspect(str, Enum):
    """The six Po (corporeal souls)."""
    SHI_GOU = "shi_gou"   # Corpse Dog: survival fear
    FU_SHI = "fu_shi"     # Hidden Arrow: aggression
    QUE_YIN = "que_yin"   # Sparrow Yin: pleasure
    TUN_ZEI = "tun_zei"   # Swallowing Thief: appetite
    FEI_DU = "fei_du"     # Non-Poison: disgust
    CHU_HUI = "chu_hui"   # Defilement Remover: cleansing


AspectKind = Union[HunAspect, PoAspect]

# Hanzi spellings recognized for each aspect (traditional and simplified)
_HANZI: dict[AspectKind, tuple[str, ...]] = {
    HunAspect.TAI_GUANG: ("太光",),
    HunAspect.SHUANG_LING: ("爽靈", "爽灵"),
    HunAspect.YOU_JING: ("幽精",),
    HunAspect.TONG_MING: ("通明",),
    HunAspect.ZHENG_ZHONG: ("正中",),
    HunAspect.LING_HUI: ("靈慧", "灵慧"),
    HunAspect.TIAN_CHONG: ("天冲", "天衝"),
    PoAspect.SHI_GOU: ("尸狗", "屍狗"),
    PoAspect.FU_SHI: ("伏矢",),
    PoAspect.QUE_YIN: ("雀陰", "雀阴"),
    PoAspect.TUN_ZEI: ("吞贼", "吞賊"),
    PoAspect.FEI_DU: ("非毒",),
    PoAspect.CHU_HUI: ("除秽", "除穢"),
}

_LATIN_ONLY = re.compile(r"[^a-z]")


@dataclass(frozen=True)
class ResolvedAspect:
    """An aspect whose identity has been resolved to an enum member."""
    kind: AspectKind
    strength: float

    def to_dict(self) -> dict:
        return {"kind": self.kind.value, "strength": self.strength}


def resolve_aspect_name(name: str, family: type[Enum]) -> Optional[AspectKind]:
    """Resolve free-text aspect name within one family, or None."""
    latin = _LATIN_ONLY.sub("", name.lower())
    for kind in family:
        if any(hanzi in name for hanzi in _HANZI[kind]):
            return kind
        if latin and kind.value.replace("_", "") in latin:
            return kind
    return None


def _resolve(
    aspects: Iterable[Union[SoulAspect, ResolvedAspect]],
    family: type[Enum],
) -> list[ResolvedAspect]:
    resolved: list[ResolvedAspect] = []
    for aspect in aspects:
        if isinstance(aspect, ResolvedAspect):
            if isinstance(aspect.kind, family):
                resolved.append(aspect)
            continue
        kind = resolve_aspect_name(aspect.name, family)
        if kind is None:
            logger.debug("aspects.unrecognized", name=aspect.name, family=family.__name__)
            continue
        resolved.append(ResolvedAspect(kind=kind, strength=max(0.0, min(1.0, aspect.strength))))
    return resolved


def resolve_hun(aspects: Iterable[Union[SoulAspect, ResolvedAspect]]) -> list[ResolvedAspect]:
    return _resolve(aspects, HunAspect)


def resolve_po(aspects: Iterable[Union[SoulAspect, ResolvedAspect]]) -> list[ResolvedAspect]:
    return _resolve(aspects, PoAspect)


def mean_strength(aspects: Sequence[ResolvedAspect]) -> float:
    """Average strength of a family; an empty family counts as 0."""
    if not aspects:
        return 0.0
    return sum(a.strength for a in aspects) / len(aspects)


# ---------------------------------------------------------------------------
# Emotion nudges
# ---------------------------------------------------------------------------

EmotionEffect = Callable[[EmotionDynamicsState, float], None]


def _tai_guang(state: EmotionDynamicsState, s: float) -> None:
    state.attractor.valence += s * 0.1
    state.attractor.arousal -= s * 0.05


def _shuang_ling(state: EmotionDynamicsState, s: float) -> None:
    state.attractor.arousal += s * 0.05


def _you_jing(state: EmotionDynamicsState, s: float) -> None:
    state.current.arousal += s * 0.03
    state.current.dominance -= s * 0.02


def _zheng_zhong(state: EmotionDynamicsState, s: float) -> None:
    # Intensifies whatever moral feeling is present, either sign
    state.current.valence *= 1 + s * 0.1


def _tian_chong(state: EmotionDynamicsState, s: float) -> None:
    state.current.valence += s * 0.15
    state.current.arousal += s * 0.1


def _shi_gou(state: EmotionDynamicsState, s: float) -> None:
    # Amplifies fear: only when already unpleasant and powerless
    if state.current.valence < 0 and state.current.dominance < 0:
        state.current.arousal += s * 0.1


def _fu_shi(state: EmotionDynamicsState, s: float) -> None:
    # Amplifies anger: only when unpleasant but in control
    if state.current.valence < 0 and state.current.dominance > 0:
        state.current.arousal += s * 0.15
        state.current.dominance += s * 0.1


def _que_yin(state: EmotionDynamicsState, s: float) -> None:
    if state.current.valence > 0:
        state.current.valence += s * 0.1


def _fei_du(state: EmotionDynamicsState, s: float) -> None:
    state.current.dominance += s * 0.05


EMOTION_EFFECTS: dict[AspectKind, EmotionEffect] = {
    HunAspect.TAI_GUANG: _tai_guang,
    HunAspect.SHUANG_LING: _shuang_ling,
    HunAspect.YOU_JING: _you_jing,
    HunAspect.ZHENG_ZHONG: _zheng_zhong,
    HunAspect.TIAN_CHONG: _tian_chong,
    PoAspect.SHI_GOU: _shi_gou,
    PoAspect.FU_SHI: _fu_shi,
    PoAspect.QUE_YIN: _que_yin,
    PoAspect.FEI_DU: _fei_du,
}


def apply_aspect_influence(
    state: EmotionDynamicsState,
    hun: Iterable[Union[SoulAspect, ResolvedAspect]],
    po: Iterable[Union[SoulAspect, ResolvedAspect]],
) -> EmotionDynamicsState:
    """
    Nudge attractor and current state by the agent's soul aspects.

    Hun aspects apply first, then Po, each in input order. Po effects are
    conditional on the state the Hun effects left behind.
    """
    applied = 0
    for aspect in resolve_hun(hun) + resolve_po(po):
        effect = EMOTION_EFFECTS.get(aspect.kind)
        if effect is not None:
            effect(state, aspect.strength)
            applied += 1

    state.current = state.current.clamp()
    state.attractor = state.attractor.clamp()

    logger.debug(
        "aspects.emotion_influence_applied",
        effects=applied,
        valence=round(state.current.valence, 4),
        arousal=round(state.current.arousal, 4),
        dominance=round(state.current.dominance, 4),
    )
    return state


# ---------------------------------------------------------------------------
# Decision biases
# ---------------------------------------------------------------------------

UtilityBias = Callable[[DecisionOption, float], float]

_CONFRONTATION_TAGS = frozenset({"aggressive", "confront", "confrontational"})
_CONFRONTATION_WORDS = ("aggressive", "confront")


def is_confrontational(option: DecisionOption) -> bool:
    """Whether an option reads as aggressive or confrontational."""
    if option.tags & _CONFRONTATION_TAGS:
        return True
    description = option.description.lower()
    return any(word in description for word in _CONFRONTATION_WORDS)


HUN_UTILITY_BIAS: dict[HunAspect, UtilityBias] = {
    HunAspect.TIAN_CHONG: lambda opt, s: s * 0.2,
    HunAspect.ZHENG_ZHONG: lambda opt, s: opt.moral_alignment * s * 0.3,
    HunAspect.LING_HUI: lambda opt, s: s * 0.15,
}

PO_UTILITY_BIAS: dict[PoAspect, UtilityBias] = {
    PoAspect.SHI_GOU: lambda opt, s: -opt.risk * s * 0.4,
    PoAspect.QUE_YIN: lambda opt, s: s * 0.3 if opt.expected_utility > 0.5 else 0.0,
    PoAspect.FU_SHI: lambda opt, s: s * 0.25 if is_confrontational(opt) else 0.0,
}


def _apply_bias(
    aspects: list[ResolvedAspect],
    options: Sequence[DecisionOption],
    table: dict,
) -> list[DecisionOption]:
    biased: list[DecisionOption] = []
    for option in options:
        bias = 0.0
        for aspect in aspects:
            rule = table.get(aspect.kind)
            if rule is not None:
                bias += rule(option, aspect.strength)
        biased.append(replace(option, expected_utility=option.expected_utility + bias))
    return biased


def apply_hun_bias(
    hun: Iterable[Union[SoulAspect, ResolvedAspect]],
    options: Sequence[DecisionOption],
) -> list[DecisionOption]:
    """Shift utilities toward transcendent, moral and wise options."""
    return _apply_bias(resolve_hun(hun), options, HUN_UTILITY_BIAS)


def apply_po_bias(
    po: Iterable[Union[SoulAspect, ResolvedAspect]],
    options: Sequence[DecisionOption],
) -> list[DecisionOption]:
    """Shift utilities toward safe, pleasurable or confrontational options."""
    return _apply_bias(resolve_po(po), options, PO_UTILITY_BIAS)
