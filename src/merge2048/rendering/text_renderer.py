from merge2048.components.board import BoardSnapshot


def render_board(snapshot: BoardSnapshot, line_sep: str = "\n") -> str:
    """Plain-text board with a score header; the last spawned tile is framed with dashes."""
    n = snapshot.grid_size
    width = n * 4 + (n - 1) * 3 + 4
    rule = "-" * width
    lines = [f"Score: {snapshot.score:>12} - Finished: {str(snapshot.finished).lower()}", rule]
    for row_index, row in enumerate(snapshot.rows()):
        cells = []
        for col_index, value in enumerate(row):
            if snapshot.last_spawned == (row_index, col_index):
                cells.append(f"-{value:^4}-")
            else:
                cells.append(f" {value:^4} ")
        lines.append("|" + "|".join(cells) + "|")
    lines.append(rule)
    return line_sep.join(lines)
