"""Version information shown by the menu."""

from dataclasses import dataclass

_VERSION_RULE = (
    "### Version Rule ###"
    "\n"
    "\n> 1.0.0.0.0 : complete?"
    "\n> 0.1.0.0.0 : road finished"
    "\n> 0.0.1.0.0 : one road task finished"
    "\n> 0.0.0.1.0 : bug fix, improvement of an existing feature"
    "\n> 0.0.0.0.1 : change the user need not know about"
)

_ROAD_TO_1_8 = (
    "### Road 2 Version 1.8.0.0.0 ###"
    "\n"
    "\n[o] update    function   : inspector - output_note"
    "\n[o] update    class      : CursorPoint - constructor, operators +, +="
    "\n[o] update    inspector  : source range output"
    "\n[o] update    inspector  : declarations print their text before running"
    "\n[o] update    inspector  : expect_false, expect_ne - more visible colours"
    "\n[o] add class            : CacheCleaner"
    "\n[o] add method           : StopWatch > reset"
    "\n[o] add method           : StopWatch > average time output"
    "\n[o] update class         : CacheCleaner > copy added, assignment removed"
    "\n[ ] ..."
)


@dataclass(frozen=True)
class VersionInfo:
    """Version numbers, version rule text and next-version roadmap."""

    name: str = "trialmenu"
    numbers: tuple = ("1", "7", "1", "3", "0")
    version_rule: str = _VERSION_RULE
    next_roadmap: str = _ROAD_TO_1_8

    def version_string(self) -> str:
        """Return the title form, e.g. ``name : v1.7.1.3.0``."""
        return f"{self.name} : v{'.'.join(self.numbers)}"


VERSION_INFO = VersionInfo()