"""Japanese strings."""

TRANSLATIONS = {
    # Seats and winds
    "seat.east": "東家",
    "seat.south": "南家",
    "seat.west": "西家",
    "seat.north": "北家",
    "wind.east": "東",
    "wind.south": "南",
    "round.label": "{wind}{number}局{honba}本場",

    # Settlement kinds
    "kind.tsumo": "ツモ",
    "kind.ron": "ロン",
    "kind.draw": "流局",

    # Hand value names
    "rank.yakuman": "役満",
    "rank.sanbaiman": "三倍満",
    "rank.baiman": "倍満",
    "rank.haneman": "跳満",
    "rank.mangan": "満貫",
    "rank.han_fu": "{han}翻{fu}符",

    # History descriptions
    "desc.tsumo_dealer": "親{winner}のツモ {han}翻{fu}符、子は各{each}点（うち{honba}点は本場）、"
                         "供託{pool}点、リーチ棒{riichi}点、合計{total}点の収入。",
    "desc.tsumo": "{winner}のツモ {han}翻{fu}符、親{dealer}が{dealer_pay}点（うち{honba}点は本場）、"
                  "他の子が{other_pay}点（うち{honba}点は本場）、供託{pool}点、"
                  "リーチ棒{riichi}点、合計{total}点の収入。",
    "desc.ron_dealer": "親{winner}が{loser}からロン {han}翻{fu}符、{payment}点（うち{honba}点は本場）、"
                       "供託{pool}点、リーチ棒{riichi}点、合計{total}点の収入。",
    "desc.ron": "{winner}が{loser}からロン {han}翻{fu}符、{payment}点（うち{honba}点は本場）、"
                "供託{pool}点、リーチ棒{riichi}点、合計{total}点の収入。",
    "desc.draw": "流局、この局のリーチ棒{riichi}点は供託へ。聴牌：{tenpai}、ノーテン：{noten}。",
    "desc.name_separator": "、",
    "desc.nobody": "なし",
    "summary.tsumo": "{winner}のツモ（{label}）",
    "summary.ron": "{winner}が{loser}からロン（{label}）",
    "summary.draw": "流局（{label}）",

    # Errors
    "error.invalid_hand": "正しい翻数と符数を入力してください",
    "error.no_winner": "和了者（ロンは放銃者も）を選んでください",
    "error.same_seat": "和了者と放銃者は別のプレイヤーにしてください",
    "error.flags": "リーチ/聴牌の指定は4人分必要です",

    # Board
    "label.title": "麻雀点数板",
    "label.dealer": "親：{name}",
    "label.dealer_mark": "(親)",
    "label.pool": "供託：{points}点（{sticks}本）",
    "label.elapsed": "経過 {minutes} 分",
    "label.total": "合計（供託含む）：",
    "label.scores": "点数",
    "label.rank": "{rank}位",
    "label.diff_matrix": "点差",
    "col.seat": "席",
    "col.player": "プレイヤー",
    "col.points": "点数",
    "col.rank": "順位",
    "col.delta": "増減",
    "col.after": "精算後",
    "col.time": "時刻",
    "col.round": "局",
    "col.kind": "種類",
    "col.riichi": "リーチ",
    "col.deltas": "点数増減",
    "col.description": "詳細",
    "col.uma": "ウマ込み",

    # Preview
    "preview.title": "精算プレビュー",
    "preview.unavailable": "入力が不完全です",
    "preview.winner": "和了：{name}（{rank}）",
    "preview.income": "供託収入 {pool}点、リーチ棒収入 {riichi}点",
    "preview.pool": "供託：{before} → {after}点",

    # History
    "history.title": "対局履歴",
    "history.empty": "精算履歴はありません",

    # Undo / redo
    "undo.last": "前回の精算：{kind} {summary}（{time}）",
    "undo.none": "取り消せる精算はありません",
    "undo.can_undo": "取り消し可能",
    "undo.can_redo": "取り消し済み、やり直し可能",
    "undo.nothing": "取り消せる精算はありません",
    "redo.nothing": "やり直せる精算はありません",

    # Final settlement
    "final.title": "終局精算",
    "final.ranking": "最終順位",

    # Messages
    "msg.undone": "取り消しました：{summary}",
    "msg.redone": "やり直しました：{summary}",
    "msg.round_edited": "局情報を修正しました",
    "msg.names_edited": "名前を更新しました",
    "msg.reset": "新しい対局を開始しました",
    "msg.cancelled": "キャンセルしました",
    "msg.state_loaded": "前回の対局を復元しました",
    "msg.log_saved": "対局ログを保存しました：{path}",
    "msg.goodbye": "お疲れさまでした！",

    # Prompts
    "prompt.choose_action": "操作を選んでください：",
    "prompt.invalid_input": "無効な入力です",
    "prompt.press_enter": "Enterで続行...",
    "prompt.confirm": "精算しますか？(y/n)",
    "prompt.confirm_reset": "新しい対局を始めますか？(y/n)",
    "prompt.reset_names": "名前もリセットしますか？(y/n)",
    "prompt.winner": "和了者の番号：",
    "prompt.loser": "放銃者の番号：",
    "prompt.han": "翻数",
    "prompt.fu": "符数",
    "prompt.riichi": "この局のリーチ者（空白区切り、なしはEnter）：",
    "prompt.tenpai": "聴牌者（空白区切り、なしはEnter）：",
    "prompt.wind": "場風（1=東 2=南）：",
    "prompt.hand_number": "局数（1-4）：",
    "prompt.honba": "本場：",
    "prompt.dealer": "親の番号：",
    "prompt.name": "{seat}の名前",
    "prompt.name_hint": "Enterで現在の名前のまま、- で初期値に戻す",

    # Menu
    "menu.tsumo": "ツモ",
    "menu.ron": "ロン",
    "menu.draw": "流局",
    "menu.undo": "前回の精算を取り消す",
    "menu.redo": "やり直す",
    "menu.history": "対局履歴",
    "menu.diff": "点差表",
    "menu.edit_round": "局情報の修正",
    "menu.edit_names": "名前の変更",
    "menu.final": "終局精算",
    "menu.reset": "新しい対局",
    "menu.language": "言語 / Language",
    "menu.quit": "終了",

    # Language
    "lang.select": "言語を選択 / Select language:",
    "lang.zh": "中文",
    "lang.ja": "日本語",
    "lang.en": "English",
}
