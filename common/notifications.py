"""
Notification sender - best-effort email delivery.

Failures are logged and never propagate to the calling operation.
"""
import logging
from django.conf import settings
from django.core.mail import send_mail
from django.db import transaction

logger = logging.getLogger(__name__)


def send_notification(address, subject, body):
    """
    Deliver a plain-text message. Returns True when the mail backend accepted it.
    """
    if not address:
        logger.warning(f"Notification '{subject}' skipped: no recipient address")
        return False
    try:
        send_mail(
            subject,
            body,
            getattr(settings, 'DEFAULT_FROM_EMAIL', None),
            [address],
            fail_silently=False,
        )
        logger.info(f"Email sent to {address}: {subject}")
        return True
    except Exception as e:
        logger.error(f"Email to {address} failed: {str(e)}", exc_info=True)
        return False


def notify_after_commit(address, subject, body):
    """Fire-and-forget: send once the surrounding transaction commits"""
    transaction.on_commit(lambda: send_notification(address, subject, body))


def welcome_message(tenant, password):
    site_name = getattr(settings, 'PG_SITE_NAME', 'PG Management')
    login_url = getattr(settings, 'PG_LOGIN_URL', '')
    subject = f"Welcome to {site_name} - Login Credentials"
    body = (
        f"Hello {tenant.name},\n\n"
        f"Welcome to {site_name}! Your tenant account has been successfully created.\n\n"
        f"Here are your login details:\n"
        f"URL: {login_url}\n"
        f"Email: {tenant.email}\n"
        f"Password: {password}\n"
        f"Room No: {tenant.room_no}\n"
        f"Deposit: {tenant.deposit}\n\n"
        f"IMPORTANT: Please login to your dashboard and change your password immediately.\n\n"
        f"Regards,\n{site_name} Team"
    )
    return subject, body


def bill_message(tenant, bill):
    site_name = getattr(settings, 'PG_SITE_NAME', 'PG Management')
    subject = f"{bill.type} Bill: {bill.month} {bill.year}"
    body = (
        f"Hello {tenant.name},\n\n"
        f"A {bill.type.lower()} bill of ₹{bill.amount} for {bill.month} {bill.year} "
        f"has been generated and added to your dashboard. "
        f"Please pay by {bill.due_date.strftime('%a %b %d %Y')}.\n\n"
        f"Regards,\n{site_name} Team"
    )
    return subject, body


def receipt_message(tenant, bill):
    site_name = getattr(settings, 'PG_SITE_NAME', 'PG Management')
    subject = f"Payment received: {bill.type} {bill.month} {bill.year}"
    body = (
        f"Hello {tenant.name},\n\n"
        f"We have received your payment of ₹{bill.amount} for the {bill.type.lower()} bill "
        f"of {bill.month} {bill.year}.\n"
        f"Transaction reference: {bill.transaction_ref}\n\n"
        f"Regards,\n{site_name} Team"
    )
    return subject, body
