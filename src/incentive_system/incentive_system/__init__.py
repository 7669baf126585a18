"""Incentive & Performance Scoring package.

Organized by feature modules (points, attendance, payroll, leaderboard, eotm, ...)
with a thin Flask controller layer over service/repository layers.
"""
