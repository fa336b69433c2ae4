def assert_conversation(conversation, *expected):
    """
    Assert a conversation matches (sender, text) pairs, in order.
    Accepts Message objects or their JSON dict form.
    """
    actual = []
    for message in conversation:
        if isinstance(message, dict):
            actual.append((message["sender"], message["text"]))
        else:
            actual.append((message.sender, message.text))

    assert actual == list(expected), f"Conversation mismatch:\nexpected: {list(expected)}\nactual:   {actual}"


def senders(conversation):
    """Sender sequence of a conversation."""
    return [m["sender"] if isinstance(m, dict) else m.sender for m in conversation]
