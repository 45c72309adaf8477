"""Farm Ledger package.

Feature modules (laborers, attendance, payroll, notes) each ship a model,
a repository interface with its MySQL implementation, a service and a thin
Flask controller.
"""
