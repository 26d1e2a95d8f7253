def score_answer(correct_label, submitted):
    """Return 1 when ``submitted`` matches the stored label exactly, else 0.

    ``correct_label`` is None when the question does not exist. Comparison is
    case-sensitive; there is no partial credit and no negative score.
    """
    if correct_label is None or not isinstance(submitted, str):
        return 0
    return 1 if submitted == correct_label else 0
