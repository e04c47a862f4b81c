"""Question sequencing: scripted questions first, then the language model.

A session is ``ASKING(i)`` while ``question_index < len(questions)`` and
``OPEN_ENDED`` once the index reaches ``len(questions)``. Every function here
returns the list of texts to send, in order.
"""
from enum import Enum
from typing import List, Sequence
from models.conversation import Session
from services.llm import complete
from .script import GREETING, OPEN_ENDED_NOTICE, START_ANNOUNCEMENT


class Phase(str, Enum):
    ASKING = "asking"
    OPEN_ENDED = "open_ended"


def current_phase(session: Session, questions: Sequence[str]) -> Phase:
    if session.question_index < len(questions):
        return Phase.ASKING
    return Phase.OPEN_ENDED


def start(session: Session, questions: Sequence[str]) -> List[str]:
    """Run the start transition: system turn, greeting, first question"""
    session.append("system", START_ANNOUNCEMENT)
    session.started = True
    outgoing = [GREETING]
    if current_phase(session, questions) is Phase.ASKING:
        outgoing.append(questions[session.question_index])
    return outgoing


def repeat_prompt(session: Session, questions: Sequence[str]) -> List[str]:
    """What to send when an already started chat asks to start again"""
    if current_phase(session, questions) is Phase.ASKING:
        return [questions[session.question_index]]
    return [OPEN_ENDED_NOTICE]


async def advance(session: Session, text: str, questions: Sequence[str]) -> List[str]:
    """Consume one user message.

    The user turn and any index change are committed before the model is
    called, so a ModelCallFailure leaves them in place.
    """
    session.last_user_input = text
    session.append("user", text)

    if current_phase(session, questions) is Phase.ASKING:
        session.question_index += 1
        if session.question_index < len(questions):
            return [questions[session.question_index]]

    reply = await complete(session.transcript, text)
    session.last_model_reply = reply
    session.append("assistant", reply)
    return [reply]
