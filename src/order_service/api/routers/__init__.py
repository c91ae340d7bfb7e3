"""
order_service.api.routers

HTTP routers: health, orders, messages, receipts.
"""
