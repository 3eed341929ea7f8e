"""Fixed unit rosters.

UNIT_ROSTER is the full in-game roster used to constrain generated strategies.
It is maintained by hand and intentionally covers more units than any loaded
catalog or stat table.
"""

UNIT_ROSTER: tuple[str, ...] = (
    "Abyss",
    "Arclight",
    "Crawler",
    "Fang",
    "Farseer",
    "Fire Badger",
    "Fortress",
    "Hacker",
    "Hound",
    "Marksman",
    "Melting Point",
    "Mustang",
    "Overlord",
    "Phantom Ray",
    "Phoenix",
    "Raiden",
    "Rhino",
    "Sabertooth",
    "Sandworm",
    "Scorpion",
    "Sledgehammer",
    "Steel Ball",
    "Stormcaller",
    "Tarantula",
    "Typhoon",
    "Vulcan",
    "War Factory",
    "Wasp",
    "Wraith",
)

AIR_UNITS: frozenset[str] = frozenset(
    {"Phoenix", "Wasp", "Phantom Ray", "Wraith", "Raiden", "Overlord", "Abyss"}
)
