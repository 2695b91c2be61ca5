"""
Background task scheduler for automatic monthly rent generation.
Uses APScheduler to run tasks in the background without requiring external services.
"""
import logging
import atexit
from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.cron import CronTrigger
from django.utils import timezone

logger = logging.getLogger(__name__)

# Global scheduler instance
scheduler = None


def generate_monthly_rent_job(clock=timezone.localdate):
    """
    Background job to generate monthly rent bills for every housed tenant.
    Runs on the 1st of each month at 00:00 (midnight).

    clock returns the date that decides the billing period.
    """
    from billing.services import BillingService

    try:
        as_of = clock()
        logger.info(f"Starting scheduled monthly rent generation for {as_of:%B %Y}...")
        result = BillingService().generate_monthly_rent(as_of=as_of)
        logger.info(
            f"Scheduled monthly rent generation completed: "
            f"{result.created_count} created, {result.skipped} skipped"
        )
        return result
    except Exception as e:
        logger.error(f"Error in scheduled monthly rent generation: {str(e)}", exc_info=True)
        return None


def start_scheduler():
    """
    Initialize and start the background scheduler.
    This should be called once when Django starts.
    """
    global scheduler

    if scheduler is not None and scheduler.running:
        logger.warning("Scheduler is already running")
        return

    try:
        # Create scheduler
        scheduler = BackgroundScheduler()

        # Get timezone from Django settings
        tz = timezone.get_current_timezone()

        # Schedule monthly rent generation: 1st of every month at 00:00
        scheduler.add_job(
            generate_monthly_rent_job,
            trigger=CronTrigger(
                day=1,  # First day of month
                hour=0,  # Midnight
                minute=0,
                timezone=tz
            ),
            id='generate_monthly_rent',
            name='Generate Monthly Rent Bills',
            replace_existing=True,
            max_instances=1,  # Prevent overlapping runs
            coalesce=True  # Combine multiple pending executions into one
        )

        # Start the scheduler
        scheduler.start()
        logger.info("Background scheduler started successfully")
        logger.info(f"Monthly rent generation scheduled for 1st of each month at 00:00 ({tz})")

        # Register shutdown handler
        atexit.register(stop_scheduler)

    except Exception as e:
        logger.error(f"Failed to start scheduler: {str(e)}", exc_info=True)
        scheduler = None


def stop_scheduler():
    """
    Stop the background scheduler.
    Should be called when Django shuts down.
    """
    global scheduler

    if scheduler is not None and scheduler.running:
        try:
            scheduler.shutdown(wait=True)
            logger.info("Background scheduler stopped")
        except Exception as e:
            logger.error(f"Error stopping scheduler: {str(e)}", exc_info=True)
        finally:
            scheduler = None
