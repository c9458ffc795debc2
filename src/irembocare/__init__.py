"""IremboCare+ 卢旺达健康信息服务."""
