import structlog

from account_ledger.application import LedgerService
from account_ledger.config import Settings, settings
from account_ledger.logging import configure_logging
from account_ledger.presentation import format_history


logger = structlog.get_logger()


def run_demo(service: LedgerService, config: Settings) -> list[str]:
    account_id = service.create_account()
    service.deposit(account_id, config.demo_deposit)
    service.withdrawal(account_id, config.demo_withdrawal)
    return format_history(service.history(account_id))


def main() -> None:
    configure_logging(
        level=settings.log_level,
        log_format=settings.log_format,
    )

    logger.info(
        "starting_account_ledger_demo",
        log_level=settings.log_level,
        overdraft_floor=str(settings.overdraft_floor),
    )

    service = LedgerService(overdraft_floor=settings.overdraft_floor)
    for line in run_demo(service, settings):
        print(line)


if __name__ == "__main__":
    main()
