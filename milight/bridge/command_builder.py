from milight.bridge.const import (
    COMMAND_LENGTH,
    COMMAND_SUFFIX,
    MAX_BYTE,
    MIN_BYTE,
)


def check_byte(value, label="value"):
    if not isinstance(value, int):
        raise TypeError(f"{label} must be an int, got {type(value).__name__}")

    if not MIN_BYTE <= value <= MAX_BYTE:
        raise ValueError(
            f"{label} must be between {MIN_BYTE} and {MAX_BYTE}, got {value}"
        )

    return value


class BridgeCommandBuilder:
    def command_bytes(self, command, value=0x00):
        command = check_byte(command, "command")
        value = check_byte(value, "value")

        payload = bytes([command, value, COMMAND_SUFFIX])

        assert len(payload) == COMMAND_LENGTH

        return payload
