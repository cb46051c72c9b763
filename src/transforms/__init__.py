"""Record transforms: new entrant flagging and columnar encoding."""
