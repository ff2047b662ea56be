"""Lightweight stand-ins for an execution tool so tests run without a cluster."""


class FakeDataFrame:
    def __init__(self, columns, rows):
        self.columns = list(columns)
        self.rows = [tuple(row) for row in rows]

    def collect(self):
        return list(self.rows)


def statement_of(request):
    """SQL the request stands for; SHOW commands travel as the session init statement."""
    return request.options.get("sessionInitStatement") or request.options["query"]


class FakeTool:
    """Answers queries from a map of SQL fragment -> (columns, rows).

    A query matching a fragment in ``failing`` raises, as a database would for a
    missing grant or catalog.
    """

    def __init__(self, results=None, failing=()):
        self.results = dict(results or {})
        self.failing = tuple(failing)
        self.requests = []
        self.job_groups = []

    def query(self, request):
        self.requests.append(request)
        sql = statement_of(request)
        for fragment in self.failing:
            if fragment in sql:
                raise RuntimeError(f"SQL compilation error: {fragment}")
        for fragment, (columns, rows) in self.results.items():
            if fragment in sql:
                return FakeDataFrame(columns, rows)
        return FakeDataFrame(["VALUE"], [])

    def executed_sql(self):
        return [statement_of(request) for request in self.requests]

    def set_job_context(self, *, pool, group_id, description):
        self.job_groups.append(group_id)

    def clear_job_context(self):
        pass

    def stop(self):
        pass
