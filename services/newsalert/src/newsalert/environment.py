"""
Host environment labels for the NewsAlert widget.

Maps the host surface (SharePoint page, or the Office / Outlook / Teams
host reported by the Teams SDK) and whether the widget is served from a
local dev origin to a fixed, human-readable label.
"""

from __future__ import annotations

import enum

from newsalert.host import HostEnvironment


class HostSurface(str, enum.Enum):
    """Host surfaces the widget recognises."""

    SHAREPOINT = "SharePoint"
    OFFICE = "Office"
    OUTLOOK = "Outlook"
    TEAMS = "Teams"
    UNKNOWN = "Unknown"


# Teams SDK host names → surface.  ``TeamsModern`` is the new Teams client.
_TEAMS_HOST_NAMES: dict[str, HostSurface] = {
    "Office": HostSurface.OFFICE,
    "Outlook": HostSurface.OUTLOOK,
    "Teams": HostSurface.TEAMS,
    "TeamsModern": HostSurface.TEAMS,
}

UNKNOWN_ENVIRONMENT = "The app is running in an unknown environment"

# (surface, is_local) → label
ENVIRONMENT_LABELS: dict[tuple[HostSurface, bool], str] = {
    (HostSurface.SHAREPOINT, True): (
        "The app is running on your local environment as SharePoint web part"
    ),
    (HostSurface.SHAREPOINT, False): "The app is running on SharePoint page",
    (HostSurface.TEAMS, True): (
        "The app is running on your local environment as Microsoft Teams app"
    ),
    (HostSurface.TEAMS, False): "The app is running in Microsoft Teams",
    (HostSurface.OFFICE, True): "The app is running on your local environment in office.com",
    (HostSurface.OFFICE, False): "The app is running in office.com",
    (HostSurface.OUTLOOK, True): "The app is running on your local environment in Outlook",
    (HostSurface.OUTLOOK, False): "The app is running in Outlook",
}


def resolve_surface(host_name: str | None) -> HostSurface:
    """Return the surface for a Teams SDK *host_name*.

    No host name means there is no Teams context, so the widget is on a
    SharePoint page.
    """
    if not host_name:
        return HostSurface.SHAREPOINT
    return _TEAMS_HOST_NAMES.get(host_name, HostSurface.UNKNOWN)


def describe_environment(environment: HostEnvironment) -> str:
    """Return the label for *environment*, or the unknown-environment label."""
    surface = resolve_surface(environment.host_name)
    return ENVIRONMENT_LABELS.get((surface, environment.is_local), UNKNOWN_ENVIRONMENT)
