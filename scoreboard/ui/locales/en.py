"""English strings."""

TRANSLATIONS = {
    # Seats and winds
    "seat.east": "East",
    "seat.south": "South",
    "seat.west": "West",
    "seat.north": "North",
    "wind.east": "East",
    "wind.south": "South",
    "round.label": "{wind} {number}, {honba} honba",

    # Settlement kinds
    "kind.tsumo": "Tsumo",
    "kind.ron": "Ron",
    "kind.draw": "Draw",

    # Hand value names
    "rank.yakuman": "Yakuman",
    "rank.sanbaiman": "Sanbaiman",
    "rank.baiman": "Baiman",
    "rank.haneman": "Haneman",
    "rank.mangan": "Mangan",
    "rank.han_fu": "{han} han {fu} fu",

    # History descriptions
    "desc.tsumo_dealer": "Dealer {winner} tsumo {han} han {fu} fu, each player pays {each} "
                         "({honba} honba), pool {pool}, riichi sticks {riichi}, total gain {total}.",
    "desc.tsumo": "{winner} tsumo {han} han {fu} fu, dealer {dealer} pays {dealer_pay} "
                  "({honba} honba), others pay {other_pay} ({honba} honba), pool {pool}, "
                  "riichi sticks {riichi}, total gain {total}.",
    "desc.ron_dealer": "Dealer {winner} ron off {loser} {han} han {fu} fu, {payment} "
                       "({honba} honba), pool {pool}, riichi sticks {riichi}, total gain {total}.",
    "desc.ron": "{winner} ron off {loser} {han} han {fu} fu, {payment} ({honba} honba), "
                "pool {pool}, riichi sticks {riichi}, total gain {total}.",
    "desc.draw": "Exhaustive draw, {riichi} in riichi sticks go to the pool. "
                 "Tenpai: {tenpai}. Noten: {noten}.",
    "desc.name_separator": ", ",
    "desc.nobody": "none",
    "summary.tsumo": "{winner} tsumo ({label})",
    "summary.ron": "{winner} ron off {loser} ({label})",
    "summary.draw": "Draw ({label})",

    # Errors
    "error.invalid_hand": "Enter a valid han and fu",
    "error.no_winner": "Choose the winner (and the discarder for ron)",
    "error.same_seat": "Winner and discarder must be different players",
    "error.flags": "Riichi/tenpai flags must cover all four seats",

    # Board
    "label.title": "Riichi Scoreboard",
    "label.dealer": "Dealer: {name}",
    "label.dealer_mark": "(D)",
    "label.pool": "Pool: {points} ({sticks} sticks)",
    "label.elapsed": "{minutes} min elapsed",
    "label.total": "Total incl. pool:",
    "label.scores": "Scores",
    "label.rank": "#{rank}",
    "label.diff_matrix": "Point differences",
    "col.seat": "Seat",
    "col.player": "Player",
    "col.points": "Points",
    "col.rank": "Rank",
    "col.delta": "Change",
    "col.after": "After",
    "col.time": "Time",
    "col.round": "Round",
    "col.kind": "Type",
    "col.riichi": "Riichi",
    "col.deltas": "Changes",
    "col.description": "Details",
    "col.uma": "Uma",

    # Preview
    "preview.title": "Settlement preview",
    "preview.unavailable": "Incomplete input, no preview",
    "preview.winner": "Winner: {name} ({rank})",
    "preview.income": "pool income {pool}, riichi income {riichi}",
    "preview.pool": "Pool: {before} → {after}",

    # History
    "history.title": "History",
    "history.empty": "No settlements yet",

    # Undo / redo
    "undo.last": "Last settlement: {kind} {summary} ({time})",
    "undo.none": "Nothing to undo",
    "undo.can_undo": "undo available",
    "undo.can_redo": "undone, redo available",
    "undo.nothing": "Nothing to undo",
    "redo.nothing": "Nothing to redo",

    # Final settlement
    "final.title": "Final Settlement",
    "final.ranking": "Final ranking",

    # Messages
    "msg.undone": "Undone: {summary}",
    "msg.redone": "Redone: {summary}",
    "msg.round_edited": "Round updated",
    "msg.names_edited": "Names updated",
    "msg.reset": "New match started",
    "msg.cancelled": "Cancelled",
    "msg.state_loaded": "Restored the previous match",
    "msg.log_saved": "Match log saved: {path}",
    "msg.goodbye": "Goodbye!",

    # Prompts
    "prompt.choose_action": "Choose an action:",
    "prompt.invalid_input": "Invalid input, try again",
    "prompt.press_enter": "Press Enter to continue...",
    "prompt.confirm": "Apply this settlement? (y/n)",
    "prompt.confirm_reset": "Start a new match? (y/n)",
    "prompt.reset_names": "Also reset names? (y/n)",
    "prompt.winner": "Winner number:",
    "prompt.loser": "Discarder number:",
    "prompt.han": "Han",
    "prompt.fu": "Fu",
    "prompt.riichi": "Riichi declarers this hand (space separated, Enter for none):",
    "prompt.tenpai": "Tenpai players (space separated, Enter for none):",
    "prompt.wind": "Round wind (1=East 2=South):",
    "prompt.hand_number": "Hand number (1-4):",
    "prompt.honba": "Honba:",
    "prompt.dealer": "Dealer number:",
    "prompt.name": "{seat} name",
    "prompt.name_hint": "Enter keeps the current name, - restores the default",

    # Menu
    "menu.tsumo": "Tsumo",
    "menu.ron": "Ron",
    "menu.draw": "Exhaustive draw",
    "menu.undo": "Undo last settlement",
    "menu.redo": "Redo",
    "menu.history": "History",
    "menu.diff": "Point differences",
    "menu.edit_round": "Edit round",
    "menu.edit_names": "Edit names",
    "menu.final": "Final settlement",
    "menu.reset": "New match",
    "menu.language": "Language / 语言",
    "menu.quit": "Quit",

    # Language
    "lang.select": "Select language / 选择语言:",
    "lang.zh": "中文",
    "lang.ja": "日本語",
    "lang.en": "English",
}
