"""HR Admin package.

This package is organized by feature modules (users, employees) with a thin
Flask JSON controller layer and service/repository layers underneath.
"""
