import math
from typing import Dict, Any, Mapping, Tuple
from rapidfuzz import fuzz

KEYWORD_SETS = {"flight": "flight_keywords", "hotel": "hotel_keywords"}
FUZZY_WINDOW = 10000

def classify_type(normalized_text: str, rules: Mapping[str, Any]) -> str:
    """
    Pick flight, hotel or other from keyword containment. The flight set is
    checked first, so a keyword shared by both sets ("reservation") or any
    flight keyword next to hotel words resolves to flight.
    """
    if any(kw in normalized_text for kw in rules["flight_keywords"]):
        return "flight"
    if any(kw in normalized_text for kw in rules["hotel_keywords"]):
        return "hotel"
    return "other"

def score_text(text: str, rules: Mapping[str, Any]) -> Dict[str, float]:
    """
    Raw scores per class on the same lowercased text classify_type sees:
    one point per keyword occurrence, plus a fuzzy boost for keywords that
    only appear misspelled (OCR noise). "other" stays at zero.
    """
    lowered = text.lower()
    head = lowered[:FUZZY_WINDOW]
    scores = {"flight": 0.0, "hotel": 0.0, "other": 0.0}
    for cls, key in KEYWORD_SETS.items():
        for kw in rules.get(key, ()):
            count = lowered.count(kw)
            scores[cls] += count
            if count == 0 and head and fuzz.partial_ratio(kw, head) > 90:
                scores[cls] += 0.5
    return scores

def _softmax(scores: Dict[str, float], temperature: float) -> Dict[str, float]:
    # equal scores (no keywords at all) come out uniform
    t = max(1e-6, temperature)
    top = max(scores.values())
    exps = {cls: math.exp((s - top) / t) for cls, s in scores.items()}
    total = sum(exps.values())
    return {cls: e / total for cls, e in exps.items()}

def probabilities(text: str, rules: Mapping[str, Any]) -> Tuple[Dict[str, float], str, float]:
    """
    Return (probs, top_class, top_prob) as floats 0..1
    """
    probs = _softmax(score_text(text, rules), float(rules.get("temperature", 1.0)))
    top_class = max(probs, key=probs.get)
    return probs, top_class, probs[top_class]
