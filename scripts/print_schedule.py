"""
Print a yearly amortization table for a loan.

Usage: python scripts/print_schedule.py [loan_amount] [rate] [tenure_years]
"""
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from moneymap.calculations.loans import (
    amortization_summary,
    generate_amortization_schedule,
    summarize_schedule_by_year,
)
from moneymap.formatting import format_currency


def main():
    args = sys.argv[1:]
    principal = float(args[0]) if len(args) > 0 else 2500000
    rate = float(args[1]) if len(args) > 1 else 8.5
    tenure = int(args[2]) if len(args) > 2 else 20

    summary = amortization_summary(principal, rate, tenure)
    print(f"Loan: {format_currency(principal)} at {rate}% for {tenure} years")
    print(f"EMI: {format_currency(summary['emi'])}")
    print(f"Total interest: {format_currency(summary['total_interest'])}")
    print()

    schedule = generate_amortization_schedule(principal, rate, tenure)
    print(f"{'Year':>4}  {'Principal':>14}  {'Interest':>14}  {'Balance':>14}")
    for row in summarize_schedule_by_year(schedule):
        print(
            f"{row['year']:>4}  "
            f"{format_currency(row['total_principal']):>14}  "
            f"{format_currency(row['total_interest']):>14}  "
            f"{format_currency(row['ending_balance']):>14}"
        )


if __name__ == "__main__":
    main()
