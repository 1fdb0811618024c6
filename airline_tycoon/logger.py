"""Logging and reporting module."""

import json
import logging
import logging.handlers
from pathlib import Path
from typing import Dict, List
from datetime import datetime

from .utils import format_cost


def configure_logging(level: str = "INFO", log_file: str = "simulation.log") -> None:
    """
    Configure structured logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        log_file: Path to log file
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)

    file_handler = logging.handlers.RotatingFileHandler(
        log_file, maxBytes=10 * 1024 * 1024, backupCount=5
    )
    file_handler.setLevel(log_level)
    file_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.addHandler(console_handler)
    root_logger.addHandler(file_handler)


class JSONLogger:
    """Writes one JSON line per simulated day for machine parsing."""

    def __init__(self, log_file: str = "days.jsonl"):
        """
        Initialize JSON logger.

        Args:
            log_file: Path to JSON lines file
        """
        self.log_file = Path(log_file)
        self.log_file.parent.mkdir(parents=True, exist_ok=True)
        self.file_handle = open(self.log_file, "a", encoding="utf-8")

    def log_day(self, entry: Dict) -> None:
        """
        Append a day entry, stamped with the wall-clock time.

        Args:
            entry: JSON-friendly day summary
        """
        log_entry = {"timestamp": datetime.now().isoformat(), **entry}
        json.dump(log_entry, self.file_handle)
        self.file_handle.write("\n")
        self.file_handle.flush()

    def close(self) -> None:
        """Close log file."""
        self.file_handle.close()


def summarize_days(log_data: List[Dict]) -> Dict:
    """
    Totals over a list of day entries.

    Args:
        log_data: Day summaries as produced by ``DailyOperationsSummary.to_log_entry``

    Returns:
        Totals and event counts by category
    """
    total_revenue = sum(float(entry.get("revenue", 0)) for entry in log_data)
    total_costs = sum(float(entry.get("costs", 0)) for entry in log_data)
    total_event_impact = sum(float(entry.get("event_impact", 0)) for entry in log_data)
    total_passengers = sum(int(entry.get("passengers_carried", 0)) for entry in log_data)

    event_counts: Dict[str, int] = {}
    for entry in log_data:
        for event in entry.get("new_events", []):
            category = event.get("category", "unknown")
            event_counts[category] = event_counts.get(category, 0) + 1

    return {
        "days": len(log_data),
        "total_revenue": total_revenue,
        "total_costs": total_costs,
        "total_profit": total_revenue - total_costs,
        "total_event_impact": total_event_impact,
        "total_passengers": total_passengers,
        "event_breakdown": event_counts,
    }


def generate_final_report(log_data: List[Dict], output_path: str) -> Dict:
    """
    Generate final report from the day log.

    Writes a JSON report and a plain text summary next to each other.

    Args:
        log_data: List of day entries
        output_path: Path to output file; the suffix is replaced

    Returns:
        Summary section of the report
    """
    output_file = Path(output_path)
    output_file.parent.mkdir(parents=True, exist_ok=True)

    summary = summarize_days(log_data)
    report = {"summary": summary, "days": log_data}

    json_path = output_file.with_suffix(".json")
    with open(json_path, "w", encoding="utf-8") as f:
        json.dump(report, f, indent=2)

    text_path = output_file.with_suffix(".txt")
    with open(text_path, "w", encoding="utf-8") as f:
        f.write("=" * 80 + "\n")
        f.write("SIMULATION FINAL REPORT\n")
        f.write("=" * 80 + "\n\n")
        f.write(f"Days Simulated: {summary['days']}\n")
        f.write(f"Passengers Carried: {summary['total_passengers']:,}\n")
        f.write(f"Revenue: {format_cost(summary['total_revenue'])}\n")
        f.write(f"Operating Costs: {format_cost(summary['total_costs'])}\n")
        f.write(f"Operating Profit: {format_cost(summary['total_profit'])}\n")
        f.write(f"Event Impact: {format_cost(summary['total_event_impact'])}\n\n")
        f.write("Events by Category:\n")
        for category, count in summary["event_breakdown"].items():
            f.write(f"  {category}: {count}\n")
        f.write("\n" + "=" * 80 + "\n")

    logging.info(f"Final report generated: {json_path} and {text_path}")
    return summary
