def default_scope():
    return None
