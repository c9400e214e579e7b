# Python
import os
import sys

import pytest

if __name__ == '__main__':
    sys.path.append(os.path.join(os.getcwd(), "src"))

    packages = ["proto_walker"]
    targets = sys.argv[1:] or ["tests"]

    report_root = os.path.join("tests", "report")
    results_dir = os.path.join(report_root, "results")
    coverage_dir = os.path.join(report_root, "coverage")
    for directory in (results_dir, coverage_dir):
        os.makedirs(directory, exist_ok=True)

    args = [f"--cov={name}" for name in packages]
    args += [f"--cov-report=html:{coverage_dir}", "--cov-config=tests/.coveragerc"]
    args += [f"--html={os.path.join(results_dir, 'walker_report.html')}", "--self-contained-html"]

    sys.exit(pytest.main(args + targets))
