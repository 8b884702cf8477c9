"""Stroke icon paths drawn on a 24x24 grid (Feather-style)."""

from __future__ import annotations

from typing import Dict, List

ICONS: Dict[str, str] = {
    "server": "M2 2h20v8H2z M2 14h20v8H2z M6 6h.01 M6 18h.01",
    "database": (
        "M12 2C7 2 3 3.3 3 5v14c0 1.7 4 3 9 3s9-1.3 9-3V5c0-1.7-4-3-9-3z "
        "M3 5c0 1.7 4 3 9 3s9-1.3 9-3 M3 12c0 1.7 4 3 9 3s9-1.3 9-3"
    ),
    "cloud": "M18 10h-1.3A8 8 0 1 0 9 20h9a5 5 0 0 0 0-10z",
    "code": "M16 18l6-6-6-6 M8 6l-6 6 6 6",
    "terminal": "M4 17l6-6-6-6 M12 19h8",
    "shield": "M12 22s8-4 8-10V5l-8-3-8 3v7c0 6 8 10 8 10z",
    "lock": "M5 11h14v11H5z M7 11V7a5 5 0 0 1 10 0v4",
    "zap": "M13 2L3 14h9l-1 8 10-12h-9l1-8z",
    "check": "M20 6L9 17l-5-5",
    "x": "M18 6L6 18 M6 6l12 12",
    "alert": (
        "M10.3 3.9L1.8 18a2 2 0 0 0 1.7 3h17a2 2 0 0 0 1.7-3L13.7 3.9a2 2 0 0 0-3.4 0z "
        "M12 9v4 M12 17h.01"
    ),
    "globe": (
        "M12 2a10 10 0 1 0 0 20a10 10 0 1 0 0-20z M2 12h20 "
        "M12 2a15.3 15.3 0 0 1 4 10 15.3 15.3 0 0 1-4 10 15.3 15.3 0 0 1-4-10 15.3 15.3 0 0 1 4-10z"
    ),
    "activity": "M22 12h-4l-3 9L9 3l-3 9H2",
    "bell": "M18 8A6 6 0 0 0 6 8c0 7-3 9-3 9h18s-3-2-3-9 M13.7 21a2 2 0 0 1-3.4 0",
    "clock": "M12 2a10 10 0 1 0 0 20a10 10 0 1 0 0-20z M12 6v6l4 2",
    "cpu": "M4 4h16v16H4z M9 9h6v6H9z M9 1v3 M15 1v3 M9 20v3 M15 20v3 M20 9h3 M20 14h3 M1 9h3 M1 14h3",
    "download": "M21 15v4a2 2 0 0 1-2 2H5a2 2 0 0 1-2-2v-4 M7 10l5 5 5-5 M12 15V3",
    "upload": "M21 15v4a2 2 0 0 1-2 2H5a2 2 0 0 1-2-2v-4 M17 8l-5-5-5 5 M12 3v12",
    "eye": "M1 12s4-8 11-8 11 8 11 8-4 8-11 8-11-8-11-8z M12 9a3 3 0 1 0 0 6a3 3 0 1 0 0-6z",
    "file": "M13 2H6a2 2 0 0 0-2 2v16a2 2 0 0 0 2 2h12a2 2 0 0 0 2-2V9z M13 2v7h7",
    "folder": "M22 19a2 2 0 0 1-2 2H4a2 2 0 0 1-2-2V5a2 2 0 0 1 2-2h5l2 3h9a2 2 0 0 1 2 2z",
    "git": (
        "M6 3v12 M18 6a3 3 0 1 0 0 6a3 3 0 1 0 0-6z M6 15a3 3 0 1 0 0 6a3 3 0 1 0 0-6z "
        "M18 9a9 9 0 0 1-9 9"
    ),
    "layers": "M12 2L2 7l10 5 10-5-10-5z M2 17l10 5 10-5 M2 12l10 5 10-5",
    "package": "M16.5 9.4l-9-5.2 M21 16V8l-9-5-9 5v8l9 5 9-5z M3.3 7L12 12l8.7-5 M12 22V12",
    "refresh": "M23 4v6h-6 M1 20v-6h6 M3.5 9a9 9 0 0 1 14.9-3.4L23 10 M1 14l4.6 4.4A9 9 0 0 0 20.5 15",
    "rocket": (
        "M4.5 16.5c-1.5 1.3-2 5-2 5s3.7-.5 5-2c.7-.8.7-2.1-.1-2.9a2.2 2.2 0 0 0-2.9-.1z "
        "M12 15l-3-3a22 22 0 0 1 2-4A12.9 12.9 0 0 1 22 2c0 2.7-.8 7.5-6 11a22.4 22.4 0 0 1-4 2z"
    ),
    "search": "M11 3a8 8 0 1 0 0 16a8 8 0 1 0 0-16z M21 21l-4.3-4.3",
    "settings": (
        "M12 9a3 3 0 1 0 0 6a3 3 0 1 0 0-6z "
        "M19.4 15a1.7 1.7 0 0 0 .3 1.8l.1.1a2 2 0 1 1-2.8 2.8l-.1-.1a1.7 1.7 0 0 0-2.9 1.2V21a2 2 0 1 1-4 0"
    ),
    "target": "M12 2a10 10 0 1 0 0 20a10 10 0 1 0 0-20z M12 6a6 6 0 1 0 0 12a6 6 0 1 0 0-12z M12 10a2 2 0 1 0 0 4a2 2 0 1 0 0-4z",
    "users": (
        "M17 21v-2a4 4 0 0 0-4-4H5a4 4 0 0 0-4 4v2 M9 3a4 4 0 1 0 0 8a4 4 0 1 0 0-8z "
        "M23 21v-2a4 4 0 0 0-3-3.9 M16 3.1a4 4 0 0 1 0 7.8"
    ),
    "wifi": "M5 12.6a11 11 0 0 1 14.1 0 M1.4 9a16 16 0 0 1 21.2 0 M8.5 16.1a6 6 0 0 1 7 0 M12 20h.01",
}


def get_icon_names() -> List[str]:
    return list(ICONS)
