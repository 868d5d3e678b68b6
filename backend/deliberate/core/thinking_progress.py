"""Thinking Progress — pure metrics over a ThinkingSession.

Invariants:
    - Each thought contributes at most one key insight (first keyword hit)
    - Insights truncated to INSIGHT_PREVIEW_CHARS, at most MAX_INSIGHTS
    - progress_confidence in [0.5, 1.0]
"""

from deliberate.core.thinking_session import ThinkingSession, Thought

INSIGHT_KEYWORDS: tuple[str, ...] = (
    "important", "key", "critical", "insight", "realize", "understand",
)
INSIGHT_PREVIEW_CHARS: int = 100
MAX_INSIGHTS: int = 5


def extract_key_insights(thoughts: list[Thought]) -> list[str]:
    insights = []
    for thought in thoughts:
        lowered = thought.content.lower()
        if not any(k in lowered for k in INSIGHT_KEYWORDS):
            continue
        preview = thought.content[:INSIGHT_PREVIEW_CHARS]
        if len(thought.content) > INSIGHT_PREVIEW_CHARS:
            preview += "..."
        insights.append(preview)
        if len(insights) == MAX_INSIGHTS:
            break
    return insights


def suggest_next_steps(session: ThinkingSession, include_branches: bool) -> list[str]:
    steps = []
    count = len(session.thoughts)
    if count < 5:
        steps.append("Continue exploring the problem with more detailed thoughts")
    if not session.branches:
        steps.append("Consider exploring alternative approaches or perspectives")
    if count > 10 and not session.conclusion:
        steps.append("Begin synthesizing insights into a conclusion")
    if include_branches and session.branches:
        steps.append("Review and develop the existing branches further")
    return steps


def progress_confidence(session: ThinkingSession) -> float:
    count = len(session.thoughts)
    confidence = 0.5
    confidence += 0.1 * sum(count > n for n in (5, 10, 20))
    if session.branches:
        confidence += 0.1
    if session.conclusion:
        confidence += 0.2
    return min(confidence, 1.0)


def analyze_progress(session: ThinkingSession, include_branches: bool = False) -> dict:
    total = len(session.thoughts)
    average_length = (
        sum(len(t.content) for t in session.thoughts) / total if total else 0.0
    )
    result = {
        "session_id": session.id,
        "status": session.status.value,
        "total_thoughts": total,
        "active_branches": len(session.branches),
        "average_thought_length": round(average_length, 2),
        "key_insights": extract_key_insights(session.thoughts),
        "next_steps": suggest_next_steps(session, include_branches),
        "confidence": round(progress_confidence(session), 4),
        "thoughts_remaining": session.thoughts_remaining,
    }
    if include_branches:
        result["branches"] = [
            {
                "id": b.id,
                "from_thought_id": b.from_thought_id,
                "description": b.description,
                "thought_count": len(b.thoughts),
            }
            for b in session.branches
        ]
    return result
