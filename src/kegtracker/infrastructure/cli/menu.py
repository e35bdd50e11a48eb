"""Interactive menu for the keg tracker.

Reads menu choices and field values from stdin and calls KegTracker.
Domain errors are reported and the loop continues; nothing short of
choice 4 (or end of input) ends the session.
"""

from __future__ import annotations

import click

from kegtracker.application.keg_tracker import KegTracker
from kegtracker.domain.exceptions import DomainException

MENU_ADD = "1"
MENU_UPDATE = "2"
MENU_LIST = "3"
MENU_EXIT = "4"


def _show_menu() -> None:
    click.echo()
    click.echo("Keg Tracker Menu:")
    click.echo("1. Add new keg")
    click.echo("2. Update keg volume")
    click.echo("3. List all kegs")
    click.echo("4. Exit")


def _add_keg(tracker: KegTracker, unit: str) -> None:
    beer_type = click.prompt("Enter beer type", default="", show_default=False)
    size = click.prompt(f"Enter keg size ({unit})", type=float)
    location = click.prompt("Enter location", default="", show_default=False)

    try:
        keg = tracker.add(beer_type=beer_type, size=size, location=location)
    except DomainException as exc:
        click.echo(f"Error: {exc}")
        return

    click.echo(f"Keg added successfully! (ID {keg.id})")


def _update_keg(tracker: KegTracker, unit: str) -> None:
    keg_id = click.prompt("Enter keg ID", type=int)
    volume = click.prompt(f"Enter new volume ({unit})", type=float)

    try:
        tracker.update_volume(keg_id, volume)
    except DomainException as exc:
        click.echo(f"Error: {exc}")
        return

    keg = tracker.get(keg_id)
    click.echo("Keg updated successfully!")
    click.echo(
        f"Keg #{keg.id} now holds {keg.current_volume:.1f} of {keg.size:.1f} {unit} "
        f"({keg.fill_percentage:.0f}% full)"
    )


def _list_kegs(tracker: KegTracker) -> None:
    kegs = tracker.list()

    if not kegs:
        click.echo("No kegs in the system.")
        return

    click.echo()
    click.echo("Current Kegs:")
    click.echo(
        f"{'ID':<5} {'Beer Type':<20} {'Size':>8} {'Current Volume':>15} {'Location':<20}"
    )
    click.echo("-" * 72)
    for keg in kegs:
        click.echo(
            f"{keg.id:<5} {keg.beer_type:<20} {keg.size:>8.1f} "
            f"{keg.current_volume:>15.1f} {keg.location:<20}"
        )


def run_menu(tracker: KegTracker, unit: str = "gallons") -> None:
    """Loop over the menu until the user chooses to exit."""
    while True:
        _show_menu()
        choice = click.prompt("Enter your choice").strip()

        if choice == MENU_ADD:
            _add_keg(tracker, unit)
        elif choice == MENU_UPDATE:
            _update_keg(tracker, unit)
        elif choice == MENU_LIST:
            _list_kegs(tracker)
        elif choice == MENU_EXIT:
            click.echo("Exiting...")
            return
        else:
            click.echo("Invalid choice. Please try again.")
