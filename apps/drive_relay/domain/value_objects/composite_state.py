"""CompositeState Value Object.

OAuth provider의 state 파라미터로 왕복하는 `sessionId:state` 값입니다.
"""

from __future__ import annotations

from dataclasses import dataclass

from apps.drive_relay.domain.exceptions.validation import InvalidCompositeStateError

STATE_SEPARATOR = ":"


@dataclass(frozen=True, slots=True)
class CompositeState:
    """세션 ID와 anti-forgery state를 묶은 복합 state.

    두 필드 모두 비어 있으면 안 되고 구분자(`:`)를 포함할 수 없습니다.
    """

    session_id: str
    state: str

    def __post_init__(self) -> None:
        for part in (self.session_id, self.state):
            if not part or STATE_SEPARATOR in part:
                raise InvalidCompositeStateError()

    def encode(self) -> str:
        """provider에 전달할 문자열로 직렬화."""
        return f"{self.session_id}{STATE_SEPARATOR}{self.state}"

    @classmethod
    def parse(cls, raw: str | None) -> "CompositeState":
        """첫 번째 구분자 기준으로 분리하여 복원.

        Raises:
            InvalidCompositeStateError: 구분자가 없거나 한쪽이 비어 있는 경우
        """
        if not raw or STATE_SEPARATOR not in raw:
            raise InvalidCompositeStateError()
        session_id, state = raw.split(STATE_SEPARATOR, 1)
        return cls(session_id=session_id, state=state)

    def __str__(self) -> str:
        return self.encode()
