"""Paydesk package.

Credential lifecycle (register/login/JWT access gate) and the monthly
payroll engine, exposed through a FastAPI service.
"""
