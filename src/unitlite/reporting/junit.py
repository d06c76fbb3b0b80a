from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from junitparser import Error, Failure, JUnitXml, TestCase, TestSuite

if TYPE_CHECKING:
    from unitlite.metrics import RunSummary


def write_junit(path: Path, summary: RunSummary, suite_name: str = "unitlite") -> Path:
    """Write junit.xml for a finished run, return path."""
    from unitlite.runner import Outcome

    xml = JUnitXml()
    suite = TestSuite(suite_name)

    suite.add_property("success_rate", str(summary.success_rate))
    if summary.elapsed_ms is not None:
        for stat_name, stat_val in summary.elapsed_ms.to_dict().items():
            if stat_val is not None:
                suite.add_property(f"elapsed_ms_{stat_name}", str(stat_val))
    for warning in summary.warnings:
        suite.add_property("warning", warning)

    for result in summary.outcomes:
        case = TestCase(result.name)
        case.classname = suite_name
        case.time = result.elapsed_ms / 1000.0
        if result.outcome is Outcome.FAILURE:
            case.result = Failure(result.diagnostic or "")
        elif result.outcome is Outcome.ERROR:
            case.result = Error(result.diagnostic or "")
        suite.add_testcase(case)

    # Set time after add_testcase (add_testcase resets it via update_statistics)
    suite.time = sum(o.elapsed_ms for o in summary.outcomes) / 1000.0

    # Use append (not +=) to preserve properties and time
    xml.append(suite)

    path.parent.mkdir(parents=True, exist_ok=True)
    xml.write(str(path), pretty=True)
    return path


def generate_report(junit_path: Path) -> Path:
    """Render junit.xml → report.html beside it using a Jinja2 template, return path."""
    from jinja2 import Environment, FileSystemLoader

    report_path = junit_path.parent / "report.html"
    xml = JUnitXml.fromfile(str(junit_path))

    suites = []
    for suite in xml:
        cases = []
        for case in suite:
            result = None
            if case.result:
                result = {
                    "status": type(case.result[0]).__name__,
                    "message": case.result[0].message or "",
                }
            cases.append(
                {"name": case.name, "time": case.time or 0.0, "result": result}
            )
        props = [(p.name, p.value) for p in suite.properties()]
        suites.append(
            {
                "name": suite.name,
                "tests": suite.tests,
                "failures": suite.failures,
                "errors": suite.errors,
                "time": suite.time,
                "properties": props,
                "cases": cases,
            }
        )

    total_tests = sum(s["tests"] for s in suites)
    total_failures = sum(s["failures"] for s in suites)
    total_errors = sum(s["errors"] for s in suites)

    tmpl_dir = Path(__file__).parent / "templates"
    env = Environment(loader=FileSystemLoader(str(tmpl_dir)), autoescape=True)
    template = env.get_template("report.html.j2")

    html = template.render(
        suites=suites,
        total_tests=total_tests,
        total_failures=total_failures,
        total_errors=total_errors,
        junit_path=str(junit_path),
    )
    report_path.write_text(html, encoding="utf-8")
    return report_path
