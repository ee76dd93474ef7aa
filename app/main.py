"""
Streamlit Frontend for the Account Ledger

A thin presentation layer over LedgerService. Its only jobs are:
1. Parse what the user typed (account_ledger.validation)
2. Call the service
3. Show the OperationResult as a success or error message

No ledger rules live here. If a check matters for correctness it belongs
in the core, not in this file.
"""

from typing import Optional

import streamlit as st

from account_ledger.config import get_settings
from account_ledger.core import InvalidArgumentError
from account_ledger.models import ErrorCode, OperationResult
from account_ledger.service import LedgerService, create_service
from account_ledger.validation import (
    format_amount,
    parse_account_number,
    parse_amount,
    parse_name,
)


# Page configuration
st.set_page_config(
    page_title=get_settings().app.page_title,
    page_icon="🏦",
    layout="centered",
    initial_sidebar_state="expanded",
)

ERROR_HINTS = {
    ErrorCode.INVALID_ARGUMENT: "Please check the values you entered.",
    ErrorCode.DUPLICATE_ACCOUNT: "Choose a different account number.",
    ErrorCode.INSUFFICIENT_FUNDS: "Try a smaller amount.",
    ErrorCode.NOTHING_TO_UNDO: "The initial deposit cannot be undone.",
    ErrorCode.NOT_FOUND: "Check the account number.",
}


@st.cache_resource
def get_service() -> LedgerService:
    """Get or create the ledger service (one per server process)."""
    return create_service()


def show_result(result: OperationResult, success_message: str) -> None:
    """Render an OperationResult."""
    if result.success:
        st.success(success_message)
        return

    hint = ERROR_HINTS.get(result.error_code, "")
    st.error(f"{result.error_message}. {hint}".strip())


def read_account_number(text: str) -> Optional[int]:
    """Parse an account number field, showing an error if it is malformed."""
    try:
        return parse_account_number(text)
    except InvalidArgumentError as e:
        st.error(e.message)
        return None


def main():
    """Main application entry point."""
    service = get_service()

    st.sidebar.title("🏦 Account Ledger")
    st.sidebar.markdown("---")

    page = st.sidebar.radio(
        "Navigate to:",
        [
            "➕ Add Account",
            "📋 All Accounts",
            "💵 Deposit",
            "💸 Withdraw",
            "📜 Transaction History",
            "↩️ Undo Last Transaction",
            "🗑️ Delete Account",
        ],
        index=0,
    )

    if page == "➕ Add Account":
        render_add_account_page(service)
    elif page == "📋 All Accounts":
        render_accounts_page(service)
    elif page == "💵 Deposit":
        render_deposit_page(service)
    elif page == "💸 Withdraw":
        render_withdraw_page(service)
    elif page == "📜 Transaction History":
        render_history_page(service)
    elif page == "↩️ Undo Last Transaction":
        render_undo_page(service)
    elif page == "🗑️ Delete Account":
        render_delete_page(service)


def render_add_account_page(service: LedgerService):
    """Render the account creation form."""
    st.title("➕ Add New Account")

    with st.form("add_account", clear_on_submit=True):
        number_text = st.text_input("Account Number")
        name_text = st.text_input("Account Holder Name")
        deposit_text = st.text_input("Initial Deposit")
        submitted = st.form_submit_button("Add Account", type="primary")

    if not submitted:
        return

    try:
        account_number = parse_account_number(number_text)
        name = parse_name(name_text)
        initial_deposit = parse_amount(deposit_text, field="initial_deposit")
    except InvalidArgumentError as e:
        st.error(e.message)
        return

    result = service.open_account(account_number, name, initial_deposit)
    show_result(result, f"Account {account_number} added for {name}.")


def render_accounts_page(service: LedgerService):
    """Render the list of all accounts."""
    st.title("📋 All Accounts")

    accounts = service.list_accounts()
    if not accounts:
        st.info("No accounts yet. Use 'Add Account' to open the first one.")
        return

    st.table([
        {
            "Account Number": summary.account_number,
            "Account Holder": summary.name,
            "Balance": format_amount(summary.balance),
            "Transactions": summary.transaction_count,
        }
        for summary in accounts
    ])
    st.markdown(f"**Total held:** {format_amount(service.total_balance())}")


def _render_amount_page(service: LedgerService, operation: str):
    label = operation.capitalize()

    with st.form(operation, clear_on_submit=True):
        number_text = st.text_input("Account Number")
        amount_text = st.text_input(f"{label} Amount")
        submitted = st.form_submit_button(label, type="primary")

    if not submitted:
        return

    try:
        account_number = parse_account_number(number_text)
        amount = parse_amount(amount_text)
    except InvalidArgumentError as e:
        st.error(e.message)
        return

    if operation == "deposit":
        result = service.deposit(account_number, amount)
    else:
        result = service.withdraw(account_number, amount)

    if result.success:
        show_result(
            result,
            f"{label} successful. New balance: {format_amount(result.balance)}",
        )
    else:
        show_result(result, "")


def render_deposit_page(service: LedgerService):
    """Render the deposit form."""
    st.title("💵 Deposit")
    _render_amount_page(service, "deposit")


def render_withdraw_page(service: LedgerService):
    """Render the withdrawal form."""
    st.title("💸 Withdraw")
    _render_amount_page(service, "withdraw")


def render_history_page(service: LedgerService):
    """Render one account's transaction history, newest first."""
    st.title("📜 Transaction History")

    number_text = st.text_input("Account Number")
    if not st.button("Show History", type="primary"):
        return

    account_number = read_account_number(number_text)
    if account_number is None:
        return

    statement = service.statement(account_number)
    if statement is None:
        st.error("Account not found. Check the account number.")
        return

    summary = statement.summary
    st.markdown(f"**Account Holder:** {summary.name}")
    st.markdown(f"**Current Balance:** {format_amount(summary.balance)}")
    st.table([
        {
            "Type": entry.kind.label,
            "Amount": format_amount(entry.amount),
            "Time": entry.timestamp.strftime("%Y-%m-%d %H:%M:%S"),
        }
        for entry in statement.transactions
    ])


def render_undo_page(service: LedgerService):
    """Render the undo form."""
    st.title("↩️ Undo Last Transaction")
    st.caption("Reverses the most recent deposit or withdrawal.")

    number_text = st.text_input("Account Number")
    if not st.button("Undo", type="primary"):
        return

    account_number = read_account_number(number_text)
    if account_number is None:
        return

    result = service.undo_last(account_number)
    if result.success:
        undone = result.transaction
        show_result(
            result,
            f"Undone {undone.kind.label} of {format_amount(undone.amount)}. "
            f"New balance: {format_amount(result.balance)}",
        )
    else:
        show_result(result, "")


def render_delete_page(service: LedgerService):
    """Render the account deletion form."""
    st.title("🗑️ Delete Account")
    st.warning("Deleting an account also deletes its history. This cannot be undone.")

    number_text = st.text_input("Account Number")
    confirmed = st.checkbox("I understand this account will be removed")
    if not st.button("Delete Account", type="primary", disabled=not confirmed):
        return

    account_number = read_account_number(number_text)
    if account_number is None:
        return

    result = service.close_account(account_number)
    show_result(result, f"Account {account_number} deleted.")


if __name__ == "__main__":
    main()
