def _move_toward(cursor, target):
    cx, cy = cursor
    tx, ty = target
    if tx > cx:
        return [4, 0, 0]  # Move right
    if tx < cx:
        return [3, 0, 0]  # Move left
    if ty > cy:
        return [2, 0, 0]  # Move down
    if ty < cy:
        return [1, 0, 0]  # Move up
    return None


def policy(env):
    # Strategy: read the placed words straight from the session and trace the first
    # unfound one. Walk the cursor to its first letter, press space, walk to its last
    # letter, press space, then shift to submit. Keys are released between presses
    # because the env only reacts to a fresh press.
    if env.last_space_held or env.last_shift_held:
        return [0, 0, 0]

    remaining = env.session.remaining_words()
    if not remaining:
        return [0, 0, 0]

    target = env.session.placed_word(remaining[0])
    first_row, first_col = target.cells[0]
    last_row, last_col = target.cells[-1]
    first = (first_col, first_row)
    last = (last_col, last_row)

    if env.selection_start is None:
        move = _move_toward(env.cursor_pos, first)
        return move or [0, 1, 0]

    if env.selection_start != first:
        return [0, 0, 1]  # Cancel a selection that started elsewhere

    if env.selection_end is None:
        move = _move_toward(env.cursor_pos, last)
        return move or [0, 1, 0]

    return [0, 0, 1]  # Submit
