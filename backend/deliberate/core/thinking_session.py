"""Thinking Session — ordered thoughts with branches and a terminal conclusion.

Invariants:
    - Thoughts are append-only; revise overwrites content in place and stamps metadata
    - len(thoughts) <= max_thoughts
    - Branch.from_thought_id is a lookup-only back reference into the same session
    - status transitions: active -> completed (irreversible)
"""

from dataclasses import dataclass, field
from datetime import datetime

from deliberate.core.decision_session import new_id, utc_now
from deliberate.core.domain_types import SessionStatus

DEFAULT_MAX_THOUGHTS: int = 50


@dataclass
class Thought:
    id: str
    content: str
    timestamp: datetime = field(default_factory=utc_now)
    parent_id: str | None = None
    branch_id: str | None = None
    metadata: dict = field(default_factory=dict)


@dataclass
class Branch:
    """An alternative line of thoughts forked from a parent thought."""
    id: str
    from_thought_id: str
    description: str
    thoughts: list[str] = field(default_factory=list)
    created_at: datetime = field(default_factory=utc_now)


@dataclass
class ThinkingSession:
    """Thinking aggregate root — owns thoughts and branches."""
    id: str
    problem: str
    context: str | None = None
    max_thoughts: int = DEFAULT_MAX_THOUGHTS
    thoughts: list[Thought] = field(default_factory=list)
    branches: list[Branch] = field(default_factory=list)
    status: SessionStatus = SessionStatus.ACTIVE
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)
    conclusion: str | None = None
    conclusion_confidence: float | None = None

    @property
    def is_active(self) -> bool:
        return self.status == SessionStatus.ACTIVE

    @property
    def thoughts_remaining(self) -> int:
        return self.max_thoughts - len(self.thoughts)

    @property
    def branch_ids(self) -> list[str]:
        return [b.id for b in self.branches]

    def find_thought(self, thought_id: str) -> Thought | None:
        return next((t for t in self.thoughts if t.id == thought_id), None)

    def find_branch(self, branch_id: str) -> Branch | None:
        return next((b for b in self.branches if b.id == branch_id), None)

    def touch(self) -> None:
        self.updated_at = utc_now()

    def append_thought(
        self, content: str, parent_id: str | None = None,
        branch_id: str | None = None,
    ) -> Thought:
        """Append a thought. Callers check cap and references first."""
        thought = Thought(
            id=new_id(),
            content=content,
            parent_id=parent_id,
            branch_id=branch_id,
            metadata={
                "session_id": self.id,
                "thought_number": len(self.thoughts) + 1,
            },
        )
        self.thoughts.append(thought)
        if branch_id:
            branch = self.find_branch(branch_id)
            if branch is not None:
                branch.thoughts.append(thought.id)
        self.touch()
        return thought

    def revise_thought(
        self, thought: Thought, new_content: str, reason: str | None,
    ) -> Thought:
        thought.content = new_content
        thought.metadata = {
            **thought.metadata,
            "revised": True,
            "revision_reason": reason,
            "revision_timestamp": utc_now().isoformat(),
        }
        self.touch()
        return thought

    def add_branch(self, from_thought_id: str, description: str) -> Branch:
        branch = Branch(
            id=new_id(), from_thought_id=from_thought_id,
            description=description,
        )
        self.branches.append(branch)
        self.touch()
        return branch

    def conclude(self, conclusion: str, confidence: float | None) -> None:
        self.conclusion = conclusion
        self.conclusion_confidence = confidence
        self.status = SessionStatus.COMPLETED
        self.touch()
