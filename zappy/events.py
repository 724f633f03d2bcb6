"""Lines the server sends to players and graphic monitors."""

from zappy.resources import Resource


def notify_graphics(roster, line):
    """Send ``line`` to every graphic monitor in the roster."""
    for graphic in roster.graphics():
        graphic.send(line)


def _food_items(player):
    return int(player.resources[Resource.NOURRITURE] / 126)


def message_line(text, direction):
    """Broadcast text as heard by a player from sector ``direction``.

    One leading blank is dropped; the line carries no trailing newline.
    """
    if text.startswith(" "):
        text = text[1:]
    return f"message {direction},{text}"


def position_line(player):
    """``ppo`` line for a player's position and heading."""
    return f"ppo {player.id} {player.tile.x} {player.tile.y} {int(player.direction) + 1}\n"


def inventory_line(player):
    """``pin`` line with a player's position and inventory."""
    others = " ".join(str(value) for value in player.resources[1:])
    return f"pin {player.id} {player.tile.x} {player.tile.y} {_food_items(player)} {others}\n"


def joined_line(player):
    """``pnw`` line announcing a player."""
    return (
        f"pnw {player.id} {player.tile.x} {player.tile.y} "
        f"{int(player.direction) + 1} {player.level} {player.team}\n"
    )


def egg_line(egg):
    """``enw`` line describing an existing egg."""
    return f"enw {egg.id} {egg.parent} {egg.tile.x} {egg.tile.y}\n"


def egg_laid(roster, egg, parent):
    """Tell monitors that ``parent`` laid ``egg`` on its tile."""
    notify_graphics(roster, f"enw {egg.id} {parent.id} {parent.tile.x} {parent.tile.y}\n")


def egg_hatched(roster, egg_id):
    notify_graphics(roster, f"eht {egg_id}\n")


def egg_connected(roster, egg_id):
    notify_graphics(roster, f"ebo {egg_id}\n")


def egg_died(roster, egg_id):
    notify_graphics(roster, f"edi {egg_id}\n")


def player_forked(roster, player_id):
    notify_graphics(roster, f"pfk {player_id}\n")


def player_moved(roster, player):
    notify_graphics(roster, position_line(player))


def player_inventory(roster, player):
    notify_graphics(roster, inventory_line(player))


def player_level(roster, player):
    notify_graphics(roster, f"plv {player.id} {player.level}\n")


def player_joined(roster, player):
    notify_graphics(roster, joined_line(player))


def incantation_started(roster, player, level):
    """``pic`` line listing every entry standing on the caster's tile."""
    x, y = player.tile.x, player.tile.y
    ids = "".join(
        f" {entry.id}"
        for entry in roster
        if entry.tile is not None and (entry.tile.x, entry.tile.y) == (x, y)
    )
    notify_graphics(roster, f"pic {x} {y} {level} {player.id}{ids}\n")


def incantation_ended(roster, player, success):
    """``pie`` line with the outcome; it carries no trailing newline."""
    notify_graphics(roster, f"pie {player.tile.x} {player.tile.y} {int(bool(success))}")


def player_expelled(roster, player_id):
    notify_graphics(roster, f"pex {player_id}\n")


def player_broadcast(roster, player_id, text):
    notify_graphics(roster, f"pbc {player_id} {text}\n")


def player_died(roster, player_id):
    notify_graphics(roster, f"pdi {player_id}\n")


def resource_dropped(roster, player_id, resource):
    notify_graphics(roster, f"pdr {player_id} {int(resource)}\n")


def resource_taken(roster, player_id, resource):
    notify_graphics(roster, f"pgt {player_id} {int(resource)}\n")


def game_over(roster, team):
    notify_graphics(roster, f"seg {team}\n")