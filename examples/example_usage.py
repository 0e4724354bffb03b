"""Example: drive the roster service directly (without Flask).

Controllers are a thin layer; the same operations are available in-process.
"""

from src.roster_system.roster_system.container import build_container


def main():
    container = build_container()

    def on_change(store):
        print(f"[{store.active_class_name}] present {store.present_count}/{store.total_students}")

    container.roster_store.subscribe(on_change)

    service = container.roster_service
    service.toggle("160623733128", True)
    service.add_class_from_form("M-Tech 101", [("Group A", "1", "30"), ("Group B", "101", "110")])
    service.mark_all(True)
    service.select_class("Main Batch 2024")
    print(service.get_summary())


if __name__ == "__main__":
    main()
