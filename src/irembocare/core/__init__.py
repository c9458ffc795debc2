"""核心业务逻辑."""
