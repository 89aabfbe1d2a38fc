from __future__ import annotations


def tokenize_query(query: str) -> list[str]:
    """Whitespace tokens of a query, lowercased, duplicates dropped."""
    seen: set[str] = set()
    out: list[str] = []
    for t in query.lower().split():
        if t not in seen:
            seen.add(t)
            out.append(t)
    return out


def score_match(query: str, heading: str, text: str) -> float:
    q = query.strip().lower()
    if not q:
        return 0.0

    h = heading.lower()
    hay = text.lower()

    score = 0.0
    if q in h:
        score += 3.0

    cnt = hay.count(q)
    if cnt:
        score += min(5.0, 0.5 * cnt)

    # fenced example in the section
    if score and ("```" in hay or "~~~" in hay):
        score += 0.25

    return score


def score_section(query: str, heading: str, text: str) -> float:
    """Sum of per-token scores, plus a bonus when the whole phrase matches."""
    tokens = tokenize_query(query)
    if not tokens:
        return 0.0

    score = sum(score_match(t, heading, text) for t in tokens)
    if len(tokens) > 1:
        score += score_match(query, heading, text)
    return score
