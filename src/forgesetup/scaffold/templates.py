"""JavaScript source templates for the generated bot.

Everything here is opaque text: the templates are assembled and written,
never parsed or executed.  Fragments use plain strings rather than
f-strings because the JavaScript is full of braces and ``$`` placeholders
that belong to ForgeScript.
"""

from __future__ import annotations

import textwrap
from collections.abc import Iterable
from dataclasses import dataclass

from forgesetup.models import Feature

# ---------------------------------------------------------------------------
# ForgeClient catalog
# ---------------------------------------------------------------------------

CLIENT_EVENTS: tuple[str, ...] = (
    "voiceStateUpdate",
    "userUpdate",
    "typingStart",
    "threadUpdate",
    "threadDelete",
    "threadMemberUpdate",
    "stickerDelete",
    "stickerUpdate",
    "threadCreate",
    "shardResume",
    "stageInstanceCreate",
    "stageInstanceDelete",
    "stageInstanceUpdate",
    "stickerCreate",
    "shardReconnecting",
    "shardReady",
    "shardError",
    "shardDisconnect",
    "roleUpdate",
    "roleDelete",
    "messageReactionRemoveEmoji",
    "messageUpdate",
    "presenceUpdate",
    "ready",
    "roleCreate",
    "messageReactionRemoveAll",
    "messageReactionRemove",
    "messageReactionAdd",
    "messagePollVoteRemove",
    "messageDelete",
    "messageCreate",
    "messageDeleteBulk",
    "messagePollVoteAdd",
    "guildUpdate",
    "interactionCreate",
    "inviteCreate",
    "inviteDelete",
    "guildScheduledEventDelete",
    "guildScheduledEventUpdate",
    "guildScheduledEventUserRemove",
    "guildScheduledEventUserAdd",
    "guildUnavailable",
    "guildMemberAvailable",
    "guildMemberRemove",
    "guildMemberUpdate",
    "guildScheduledEventCreate",
    "guildBanRemove",
    "guildCreate",
    "guildDelete",
    "guildMemberAdd",
    "guildBanAdd",
    "guildAvailable",
    "guildAuditLogEntryCreate",
    "error",
    "emojiUpdate",
    "entitlementCreate",
    "entitlementDelete",
    "entitlementUpdate",
    "emojiDelete",
    "emojiCreate",
    "channelPinsUpdate",
    "channelUpdate",
    "debug",
    "channelCreate",
    "channelDelete",
    "autoModerationRuleUpdate",
    "autoModerationRuleDelete",
    "autoModerationRuleCreate",
    "autoModerationActionExecution",
)

CLIENT_INTENTS: tuple[str, ...] = (
    "Guilds",
    "GuildMembers",
    "GuildModeration",
    "GuildEmojisAndStickers",
    "GuildIntegrations",
    "GuildWebhooks",
    "GuildInvites",
    "GuildVoiceStates",
    "GuildPresences",
    "GuildMessages",
    "GuildMessageReactions",
    "GuildMessageTyping",
    "DirectMessages",
    "DirectMessageReactions",
    "DirectMessageTyping",
    "MessageContent",
    "GuildScheduledEvents",
    "AutoModerationConfiguration",
    "AutoModerationExecution",
)

# (directory, loader call, label) in load order
COMMAND_LOADERS: tuple[tuple[str, str, str], ...] = (
    ("interactions", "client.applicationCommands.load", "Slash commands"),
    ("prefix", "client.commands.load", "Prefix commands"),
    ("events", "client.commands.load", "Event commands"),
    ("components", "client.commands.load", "Components commands"),
)

# ---------------------------------------------------------------------------
# Optional feature fragments
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FeatureFragment:
    """Source lines a selected feature contributes to ``index.js``."""

    feature: Feature
    import_line: str
    extension: str


FEATURE_FRAGMENTS: dict[Feature, FeatureFragment] = {
    Feature.CANVAS: FeatureFragment(
        Feature.CANVAS,
        import_line='const { ForgeCanvas } = require("@tryforge/forge.canvas");',
        extension="new ForgeCanvas()",
    ),
    Feature.DB: FeatureFragment(
        Feature.DB,
        import_line='const { ForgeDB } = require("@tryforge/forge.db");',
        extension="new ForgeDB()",
    ),
    Feature.REGEX: FeatureFragment(
        Feature.REGEX,
        import_line='const { ForgeRegex } = require("forge.regex");',
        extension="new ForgeRegex()",
    ),
}


def optional_fragments(features: Iterable[Feature]) -> list[FeatureFragment]:
    """Fragments for the selected features, in fixed catalog order."""
    selected = set(features)
    return [fragment for feature, fragment in FEATURE_FRAGMENTS.items() if feature in selected]


# ---------------------------------------------------------------------------
# index.js
# ---------------------------------------------------------------------------

_INDEX_PREAMBLE = textwrap.dedent("""\
    const { ForgeClient, LogPriority } = require("@tryforge/forgescript");
    const mongoose = require("mongoose");
    const chalk = require("chalk");
    require("dotenv").config();
""")

_ERROR_CATCHERS = textwrap.dedent("""\
    // Error catchers
    process
        .on("unhandledRejection", (reason, promise) => {
            console.error(chalk.red("❌ Unhandled Rejection at Promise:"), reason, promise);
        })
        .on("uncaughtException", (err) => {
            console.error(chalk.red("❌ Uncaught Exception:"), err);
            process.exit(1);
        });
""")

_CLIENT_OPTIONS_TAIL = textwrap.dedent("""\
        logLevel: LogPriority.None,
        prefixes: ["<@$clientID>", "<@!$clientID>", process.env.PREFIX],
        token: process.env.TOKEN,
    });
""")

# The spinner stops on the real ready event, or when login() rejects.
_STARTUP = textwrap.dedent("""\
    // Loading animation
    const frames = ["⠋", "⠙", "⠹", "⠸", "⠼", "⠴", "⠦", "⠧", "⠇", "⠏"];
    let frame = 0;

    const spinner = setInterval(() => {
        process.stdout.write(`\\r${chalk.blue(frames[frame % frames.length])} ${chalk.cyan("Starting bot...")}`);
        frame++;
    }, 100);

    client.once("ready", () => {
        clearInterval(spinner);
        console.log(`\\r${chalk.green("✔")} ${chalk.bold.green("Bot started successfully!")}`);
    });

    // Start bot
    client.login().catch((error) => {
        clearInterval(spinner);
        console.error(`\\r${chalk.red("✗")} ${chalk.bold.red("Login failed:")}`, error);
        process.exit(1);
    });
""")


def _js_array(key: str, items: Iterable[str], *, quote: bool = True) -> list[str]:
    """Render ``key: [ ... ],`` as indented lines of a ForgeClient option."""
    lines = [f"    {key}: ["]
    for item in items:
        value = f'"{item}"' if quote else item
        lines.append(f"        {value},")
    lines.append("    ],")
    return lines


def build_index(features: Iterable[Feature]) -> str:
    """Assemble the full ``index.js`` source for the given feature selection."""
    fragments = optional_fragments(features)

    lines: list[str] = [_INDEX_PREAMBLE]

    lines.append("// Optional imports")
    lines.extend(fragment.import_line for fragment in fragments)
    lines.append("")

    lines.append(_ERROR_CATCHERS)

    lines.append("// Initialize ForgeClient")
    lines.append("const client = new ForgeClient({")
    lines.extend(_js_array("events", CLIENT_EVENTS))
    lines.extend(_js_array("extensions", (fragment.extension for fragment in fragments), quote=False))
    lines.extend(_js_array("intents", CLIENT_INTENTS))
    lines.append(_CLIENT_OPTIONS_TAIL)

    lines.append(f'console.log(chalk.green("✅ {len(CLIENT_EVENTS)} Events Loaded."));')
    lines.append(f'console.log(chalk.green("✅ {len(CLIENT_INTENTS)} Intents Loaded."));')
    lines.append("")

    lines.append("// Load commands and events")
    for directory, loader, label in COMMAND_LOADERS:
        lines.append(f'{loader}("./{directory}");')
        lines.append(f'console.log(chalk.green("✅ {label} Loaded."));')
    lines.append("")

    lines.append(_STARTUP)
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Sample commands
# ---------------------------------------------------------------------------

PREFIX_PING_COMMAND = textwrap.dedent("""\
    module.exports = {
        name: "ping",
        description: "Replies with Pong!",
        type: "messageCreate",
        code: `🏓 Pong!`,
    };
""")

SLASH_PING_COMMAND = textwrap.dedent("""\
    module.exports = {
        data: {
            name: "ping",
            description: "Replies with Pong!",
        },
        code: `$interactionReply Pong!`,
    };
""")
