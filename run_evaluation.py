# Automated evaluation runner for the expense assistant

import config
from evaluation_metrics import EvaluationMetrics
from nl_to_sql_pipeline import run_nl_to_sql
from test_cases import TEST_CASES


def run_tests(cases=TEST_CASES, pipeline=None):
    metrics = EvaluationMetrics()

    for test in cases:
        print(f"\nRunning test: {test['name']}")

        response = run_nl_to_sql(test["input"], pipeline=pipeline)
        status = response["status"]
        metrics.update(status, test["expected_status"])

        print("Expected:", test["expected_status"])
        print("Got:", status)
        if response["sql"]:
            print("SQL:", response["sql"])

    report = metrics.report()
    print("\n--- FINAL EVALUATION REPORT ---")
    print(report)
    return report


if __name__ == "__main__":
    config.setup_logging("WARNING")
    run_tests()
