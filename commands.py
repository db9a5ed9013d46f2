# commands.py - slash commands typed into the input box


# ============================================================
# BASE CLASS FOR COMMANDS
# ============================================================

class RollemCommand:
    """A slash command; execute() receives the running app and the text after the name."""
    name = ""
    aliases = []

    def execute(self, app, arg: str):
        raise NotImplementedError


# ============================================================
# COMMAND REGISTRY
# ============================================================

class CommandRegistry:
    def __init__(self):
        self.commands = {}

    def register(self, command: RollemCommand):
        self.commands[command.name] = command
        for alias in command.aliases:
            self.commands[alias] = command

    def get(self, name: str):
        return self.commands.get(name)


# ============================================================
# COMMAND PARSER
# ============================================================

class CommandParser:
    def __init__(self, registry: CommandRegistry, unknown=None):
        self.registry = registry
        self.unknown = unknown or UnknownCommand()

    def parse(self, text: str):
        """
        Returns: (command, arg) or (None, None) when text is not a command
        and should be rolled instead.
        """
        text = text.strip()
        if not text.startswith("/"):
            return None, None

        parts = text.split(" ", 1)
        cmd_name = parts[0].lower()
        arg = parts[1].strip() if len(parts) > 1 else ""

        cmd = self.registry.get(cmd_name)
        if cmd:
            return cmd, arg

        return self.unknown, text


# ============================================================
# INDIVIDUAL COMMANDS
# ============================================================

class HelpCommand(RollemCommand):
    name = "/h"
    aliases = ["/help", "/?"]

    def execute(self, app, arg):
        app.action_toggle_help()


class QuitCommand(RollemCommand):
    name = "/q"
    aliases = ["/quit", "/exit"]

    def execute(self, app, arg):
        app.action_leave()


class UnknownCommand(RollemCommand):
    """Fallback for any /word the registry does not know."""

    def execute(self, app, text):
        app.notify(f"Unknown command: {text}", severity="warning")


def build_default_registry():
    registry = CommandRegistry()

    registry.register(HelpCommand())
    registry.register(QuitCommand())

    return registry
