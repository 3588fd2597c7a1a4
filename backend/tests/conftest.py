"""Shared fixtures: an in-memory stand-in for the async database session.

FakeSession understands the statements the services issue: entity or column
selects filtered by ``==`` / ``IN`` criteria. Ordering, options and limits
are ignored. Flushing enforces the same unique pairs as the real schema.
``fail_on`` ("execute" or "flush") breaks every such call; ``fail_if`` takes a
statement and breaks only the executes it returns True for.
"""

import uuid
from types import SimpleNamespace

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError
from sqlalchemy.sql import operators
from sqlalchemy.sql.elements import BooleanClauseList, False_, True_

from dayhab.models import Favorite, Review, ReviewHelpfulness

UNIQUE_PAIRS = {
    Favorite: ("user_id", "location_id"),
    Review: ("user_id", "location_id"),
    ReviewHelpfulness: ("review_id", "user_id"),
}


def _criteria(stmt):
    where = stmt.whereclause
    if where is None:
        return []
    clauses = where.clauses if isinstance(where, BooleanClauseList) else [where]
    criteria = []
    for clause in clauses:
        right = clause.right
        if isinstance(right, True_):
            value = True
        elif isinstance(right, False_):
            value = False
        else:
            value = right.value
        op = "in" if clause.operator is operators.in_op else "eq"
        criteria.append((clause.left.key, op, value))
    return criteria


def _matches(obj, criteria):
    for key, op, value in criteria:
        actual = getattr(obj, key, None)
        if op == "in" and actual not in value:
            return False
        if op == "eq" and actual != value:
            return False
    return True


class FakeResult:
    def __init__(self, rows, columns=None):
        self._rows = rows
        self._columns = columns

    def _row(self, obj):
        if self._columns is None:
            return obj
        return SimpleNamespace(**{name: getattr(obj, name) for name in self._columns})

    def scalar_one_or_none(self):
        if not self._rows:
            return None
        first = self._rows[0]
        return first if self._columns is None else getattr(first, self._columns[0])

    def scalars(self):
        if self._columns is None:
            values = list(self._rows)
        else:
            values = [getattr(obj, self._columns[0]) for obj in self._rows]
        return SimpleNamespace(all=lambda: values)

    def all(self):
        return [self._row(obj) for obj in self._rows]


class FakeSession:
    def __init__(self, rows=(), fail_on=None, fail_if=None):
        self.rows = list(rows)
        self.fail_on = fail_on
        self.fail_if = fail_if
        self.executed = []
        self.pending = []
        self.flushes = 0
        self.rolled_back = False

    def of_type(self, model):
        return [row for row in self.rows if isinstance(row, model)]

    async def execute(self, stmt):
        if self.fail_on == "execute" or (self.fail_if and self.fail_if(stmt)):
            raise OperationalError("SELECT", {}, Exception("connection refused"))
        self.executed.append(stmt)

        descriptions = stmt.column_descriptions
        entity = descriptions[0]["entity"]
        columns = None
        if descriptions[0]["expr"] is not entity:
            columns = [desc["name"] for desc in descriptions]

        criteria = _criteria(stmt)
        rows = [row for row in self.of_type(entity) if _matches(row, criteria)]
        return FakeResult(rows, columns)

    def add(self, obj):
        if getattr(obj, "id", None) is None:
            obj.id = uuid.uuid4()
        self.rows.append(obj)
        self.pending.append(obj)

    async def delete(self, obj):
        self.rows.remove(obj)

    async def flush(self):
        if self.fail_on == "flush":
            raise OperationalError("INSERT", {}, Exception("connection reset"))
        for model, keys in UNIQUE_PAIRS.items():
            seen = set()
            for row in self.of_type(model):
                pair = tuple(getattr(row, key) for key in keys)
                if pair in seen:
                    raise IntegrityError("INSERT", {}, Exception("duplicate key value violates unique constraint"))
                seen.add(pair)
        self.pending = []
        self.flushes += 1

    async def refresh(self, obj):
        pass

    async def rollback(self):
        self.rolled_back = True
        for obj in self.pending:
            if obj in self.rows:
                self.rows.remove(obj)
        self.pending = []

    async def commit(self):
        await self.flush()

    async def close(self):
        pass


@pytest.fixture()
def viewer_id():
    return uuid.uuid4()


@pytest.fixture()
def location():
    return SimpleNamespace(id=uuid.uuid4(), organization_id=uuid.uuid4())
