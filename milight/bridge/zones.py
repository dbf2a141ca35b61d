import logging

from milight.bridge.commands import command_value
from milight.bridge.const import (
    ALL_ZONES,
    BRIGHTNESS_OFFSET,
    MAX_BRIGHTNESS,
    MAX_BYTE,
    MIN_BRIGHTNESS,
    MIN_BYTE,
    ZONES,
)

logger = logging.getLogger("milight")


def zone_command_name(zone, operation):
    if zone == ALL_ZONES:
        return f"all_{operation}"

    if zone in ZONES:
        return f"zone{zone}_{operation}"

    raise ValueError(f"Zone must be {ALL_ZONES} (all) or one of {ZONES}, got {zone!r}")


def clamp(value, low, high):
    return max(low, min(high, value))


class BridgeZones:
    """
    Zone level operations on top of a ``BridgeClient``.

    Zone 0 addresses every zone at once. Commands that change a zone's color,
    brightness or mode switch it on first, since the bridge applies them to
    the most recently selected zone.
    """

    def __init__(self, client):
        self.client = client

    def zone_on(self, zone):
        return self.client.send(command_value(zone_command_name(zone, "on")))

    def zone_off(self, zone):
        return self.client.send(command_value(zone_command_name(zone, "off")))

    def zone_white(self, zone):
        command = command_value(zone_command_name(zone, "white"))

        if not self.zone_on(zone):
            return False

        return self.client.send(command)

    def zone_color(self, zone, value):
        """Returns the color byte that was sent, or -1 on failure."""
        clamped = clamp(value, MIN_BYTE, MAX_BYTE)
        if clamped != value:
            logger.warning(f"Color value {value} out of range, using {clamped}")
        value = clamped

        if self.zone_on(zone) and self.client.send(command_value("rgbw"), value):
            return value

        return -1

    def zone_brightness(self, zone, level):
        """Returns the brightness level (0-25) that was set, or -1 on failure."""
        clamped = clamp(level, MIN_BRIGHTNESS, MAX_BRIGHTNESS)
        if clamped != level:
            logger.warning(f"Brightness {level} out of range, using {clamped}")
        level = clamped

        if self.zone_on(zone) and self.client.send(
            command_value("brightness"), level + BRIGHTNESS_OFFSET
        ):
            return level

        return -1

    def disco_cycle(self, zone):
        if not self.zone_on(zone):
            return False

        return self.client.send(command_value("disco"))

    def disco_faster(self):
        return self.client.send(command_value("disco_faster"))

    def disco_slower(self):
        return self.client.send(command_value("disco_slower"))
