"""静态演示数据."""
