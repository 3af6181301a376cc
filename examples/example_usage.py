"""Example: use the service layer directly.

Goal: show that every consumer goes through the container's store and services.
"""

from src.attendance_dashboard.attendance_dashboard.main import create_container


def main():
    container = create_container()
    overview = container.dashboard_service.class_overview("Physics 202")
    print(overview.summary)
    for row in overview.top_absentees:
        print(row.name, f"{row.absent_percentage:.1f}%")
    print(container.store.get_absentees("2025-04-07"))


if __name__ == "__main__":
    main()
