"""Simplified Chinese strings."""

TRANSLATIONS = {
    # Seats and winds
    "seat.east": "东风家",
    "seat.south": "南风家",
    "seat.west": "西风家",
    "seat.north": "北风家",
    "wind.east": "东",
    "wind.south": "南",
    "round.label": "{wind}{number}局{honba}本场",

    # Settlement kinds
    "kind.tsumo": "自摸",
    "kind.ron": "荣和",
    "kind.draw": "流局",

    # Hand value names
    "rank.yakuman": "役满",
    "rank.sanbaiman": "三倍满",
    "rank.baiman": "倍满",
    "rank.haneman": "跳满",
    "rank.mangan": "满贯",
    "rank.han_fu": "{han}番{fu}符",

    # History descriptions
    "desc.tsumo_dealer": "庄家{winner}自摸{han}番{fu}符，闲家各支付{each}点（其中{honba}点为本场），"
                         "场供{pool}点，立直棒收入{riichi}点，共收入{total}点。",
    "desc.tsumo": "{winner}自摸{han}番{fu}符，庄家{dealer}支付{dealer_pay}点（其中{honba}点为本场），"
                  "其余闲家支付{other_pay}点（其中{honba}点为本场），场供{pool}点，"
                  "立直棒收入{riichi}点，共收入{total}点。",
    "desc.ron_dealer": "庄家{winner}荣和{loser}{han}番{fu}符，共{payment}点（其中{honba}点为本场），"
                       "场供{pool}点，立直棒收入{riichi}点，共收入{total}点。",
    "desc.ron": "{winner}荣和{loser}{han}番{fu}符，共{payment}点（其中{honba}点为本场），"
                "场供{pool}点，立直棒收入{riichi}点，共收入{total}点。",
    "desc.draw": "流局，本局立直棒计入场供{riichi}点，听牌：{tenpai}，未听牌：{noten}。",
    "desc.name_separator": "、",
    "desc.nobody": "无",
    "summary.tsumo": "{winner}自摸（{label}）",
    "summary.ron": "{winner}荣和{loser}（{label}）",
    "summary.draw": "流局（{label}）",

    # Errors
    "error.invalid_hand": "请填写合法的番数和符数",
    "error.no_winner": "请选择和牌家（荣和还需选择点炮家）",
    "error.same_seat": "和牌家与点炮家不能是同一家",
    "error.flags": "立直/听牌标记必须对应四家",

    # Board
    "label.title": "日麻计分板",
    "label.dealer": "庄家：{name}",
    "label.dealer_mark": "(庄)",
    "label.pool": "场供：{points}点（{sticks} 棒）",
    "label.elapsed": "已进行 {minutes} 分钟",
    "label.total": "点数合计（含场供）：",
    "label.scores": "得分",
    "label.rank": "第 {rank} 名",
    "label.diff_matrix": "点差",
    "col.seat": "座位",
    "col.player": "玩家",
    "col.points": "点数",
    "col.rank": "排名",
    "col.delta": "变动",
    "col.after": "结算后",
    "col.time": "时间",
    "col.round": "场次",
    "col.kind": "类型",
    "col.riichi": "立直",
    "col.deltas": "点数变动",
    "col.description": "说明",
    "col.uma": "顺位点",

    # Preview
    "preview.title": "结算预览",
    "preview.unavailable": "输入不完整，暂无预览",
    "preview.winner": "和牌：{name}（{rank}）",
    "preview.income": "场供收入 {pool} 点，立直棒收入 {riichi} 点",
    "preview.pool": "场供：{before} → {after} 点",

    # History
    "history.title": "对局记录",
    "history.empty": "暂无结算记录",

    # Undo / redo
    "undo.last": "上次结算：{kind} {summary}（{time}）",
    "undo.none": "暂无可撤销的结算",
    "undo.can_undo": "可撤销",
    "undo.can_redo": "已撤销，可重做",
    "undo.nothing": "没有可撤销的结算",
    "redo.nothing": "没有可重做的结算",

    # Final settlement
    "final.title": "终局结算",
    "final.ranking": "最终排名",

    # Messages
    "msg.undone": "已撤销：{summary}",
    "msg.redone": "已重做：{summary}",
    "msg.round_edited": "场况已修改",
    "msg.names_edited": "昵称已更新",
    "msg.reset": "已开始新的对局",
    "msg.cancelled": "已取消",
    "msg.state_loaded": "已恢复上次的对局",
    "msg.log_saved": "对局记录已保存：{path}",
    "msg.goodbye": "再见！",

    # Prompts
    "prompt.choose_action": "请选择操作：",
    "prompt.invalid_input": "输入无效，请重试",
    "prompt.press_enter": "按回车继续...",
    "prompt.confirm": "确认结算？(y/n)",
    "prompt.confirm_reset": "确定要开始新的对局吗？(y/n)",
    "prompt.reset_names": "同时重置昵称？(y/n)",
    "prompt.winner": "和牌家编号：",
    "prompt.loser": "点炮家编号：",
    "prompt.han": "番数",
    "prompt.fu": "符数",
    "prompt.riichi": "本局立直的玩家编号（空格分隔，直接回车表示无）：",
    "prompt.tenpai": "听牌的玩家编号（空格分隔，直接回车表示无）：",
    "prompt.wind": "场风（1=东 2=南）：",
    "prompt.hand_number": "局数（1-4）：",
    "prompt.honba": "本场数：",
    "prompt.dealer": "庄家编号：",
    "prompt.name": "{seat}昵称",
    "prompt.name_hint": "直接回车保留当前昵称，输入 - 恢复默认",

    # Menu
    "menu.tsumo": "自摸",
    "menu.ron": "荣和",
    "menu.draw": "流局",
    "menu.undo": "撤销上次结算",
    "menu.redo": "重做",
    "menu.history": "对局记录",
    "menu.diff": "点差表",
    "menu.edit_round": "修改场况",
    "menu.edit_names": "修改昵称",
    "menu.final": "终局结算",
    "menu.reset": "新对局",
    "menu.language": "切换语言 / Language",
    "menu.quit": "退出",

    # Language
    "lang.select": "选择语言 / Select language:",
    "lang.zh": "中文",
    "lang.ja": "日本語",
    "lang.en": "English",
}
