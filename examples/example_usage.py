"""Example: drive the service layer directly (no Flask).

Prints this month's leaderboard, Employee of the Month and bonus report.
"""

import importlib
from datetime import date

from config import get_settings_module

from src.incentive_system.incentive_system.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG, bonus_rates=getattr(settings, "BONUS_RATES", None))

    today = date.today()
    for entry in container.leaderboard_service.build_leaderboard(today.month, today.year):
        print(f"#{entry.rank} {entry.name}: {entry.total_points} pts")

    winner = container.eotm_service.compute_eotm(today.month, today.year)
    print("EOTM:", winner.name if winner else "-")

    for row in container.bonus_service.build_bonus_report(today.month, today.year):
        print(f"{row.name} ({row.category}): {row.bonus}")


if __name__ == "__main__":
    main()
