"""Rank of the school a person attended, written twice.

rank_conventional() uses plain statements; rank_pipeline() expresses the
same lookup as one chain: Do ops keep the person, To ops move on to the
school and then to its rank.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from pydantic import BaseModel

from pipestyle import Flow

logger = logging.getLogger("school_rank")


class School(BaseModel):
    name: str


class Person(BaseModel):
    name: str
    school: School | None = None

    def send_email(self) -> None:
        logger.info("Emailing %s", self.name)

    def get_school(self) -> School | None:
        """May return None if the person did not go to school."""
        return self.school


def get_people() -> Iterator[Person]:
    yield Person(name="John")
    yield Person(name="Jane", school=School(name="Stanford"))


def find_person(name: str) -> Person | None:
    return next((p for p in get_people() if p.name == name), None)


class SchoolRankingBoard:
    @staticmethod
    def get_rank(school: School) -> int:
        return 1 if school.name == "Stanford" else 10


def _fail(message: str) -> None:
    raise LookupError(message)


def rank_conventional(name: str) -> int:
    person = find_person(name)
    if person is None:
        msg = f"Person '{name}' not found."
        logger.error(msg)
        raise LookupError(msg)

    person.send_email()

    school = person.get_school()
    # -1 if the person did not go to school
    return SchoolRankingBoard.get_rank(school) if school is not None else -1


def rank_pipeline(name: str) -> int:
    return (
        Flow(find_person(name))
        .do_is_null(lambda: Flow(f"Person '{name}' not found.").do(logger.error).do(_fail))
        .do(Person.send_email)
        .to(Person.get_school)
        .to_not_null(SchoolRankingBoard.get_rank, -1)
        .value
    )


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    print(f"John (conventional): {rank_conventional('John')}")
    print(f"Jane (pipeline): {rank_pipeline('Jane')}")
    try:
        rank_pipeline("Mike")
    except LookupError as exc:
        print(f"Mike (pipeline): {exc}")
