# Computes evaluation metrics for the expense assistant

STATUSES = ("success", "no_result", "rejected", "error")


class EvaluationMetrics:
    def __init__(self):
        self.total = 0
        self.matched = 0
        self.counts = {status: 0 for status in STATUSES}

    def update(self, status: str, expected_status: str = None):
        self.total += 1
        self.counts[status if status in self.counts else "error"] += 1

        if expected_status is not None and status == expected_status:
            self.matched += 1

    def report(self):
        if not self.total:
            return {"total_tests": 0}

        report = {"total_tests": self.total}
        for status, count in self.counts.items():
            report[f"{status}_rate"] = round(count / self.total, 2)
        report["expectation_match_rate"] = round(self.matched / self.total, 2)
        return report
