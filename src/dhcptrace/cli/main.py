"""
dhcptrace CLI - main entry point.
"""
import threading

import click

from ..capture.scapy_source import ScapyCaptureSource, list_devices
from ..config import DEFAULT_TRACING_ENDPOINT, AnalyzerConfig
from ..exceptions import CaptureError, TracingConfigError
from ..logger_config import setup_logger
from ..pipeline.decode_loop import DecodeLoop
from ..tracing.backend import OpenTelemetrySpanBackend
from ..tracing.correlator import TransactionCorrelator


def _show_devices() -> None:
    try:
        devices = list_devices()
    except CaptureError as e:
        raise click.ClickException(str(e))

    click.echo("All available devices\n")
    for name, addresses in devices:
        click.echo(f"{name:<20} : {','.join(addresses) if addresses else '<none>'}")
    click.echo("\nType --help for usage help.")


@click.command()
@click.option('--device', '-d', default='', help='Device to capture from (omit to list devices)')
@click.option('--print/--no-print', 'print_packets', default=True, show_default=True,
              help='Print the analysed DHCP packets to standard output')
@click.option('--zipkin/--no-zipkin', 'tracing_enabled', default=False, show_default=True,
              help='Push the analysed DHCP packets to a Zipkin server')
@click.option('--zipkin-endpoint', 'tracing_endpoint', default=DEFAULT_TRACING_ENDPOINT,
              show_default=True, help='Endpoint of the Zipkin server')
def cli(device: str, print_packets: bool, tracing_enabled: bool, tracing_endpoint: str):
    """
    Passive DHCPv4 analyzer: decode DHCP packets seen on a device and trace
    each exchange by transaction id.

    Examples:
      dhcptrace
      dhcptrace -d eth0
      dhcptrace -d eth0 --no-print --zipkin
    """
    config = AnalyzerConfig(
        device=device,
        print_packets=print_packets,
        tracing_enabled=tracing_enabled,
        tracing_endpoint=tracing_endpoint,
    )
    logger = setup_logger(level=config.log_level)

    if config.list_mode:
        _show_devices()
        return

    correlator = None
    try:
        config.validate()
        if config.tracing_enabled:
            backend = OpenTelemetrySpanBackend.for_zipkin(config.tracing_endpoint, config.service_name)
            correlator = TransactionCorrelator(backend)
    except TracingConfigError as e:
        raise click.ClickException(str(e))

    source = ScapyCaptureSource(config.device)
    try:
        source.open()
    except CaptureError as e:
        if correlator is not None:
            correlator.backend.shutdown()
        raise click.ClickException(str(e))

    click.echo(f"Analyze DHCP packets on device {config.device}")
    loop = DecodeLoop(
        source,
        sink=click.echo if config.print_packets else None,
        correlator=correlator,
    )

    stop = threading.Event()
    try:
        stats = loop.run(stop)
        logger.info("Capture ended: %d frames, %d DHCP packets",
                    stats['frames_total'], stats['dhcp_total'])
    except KeyboardInterrupt:
        stop.set()
        click.echo("\nStopping capture...")
    finally:
        source.close()
        if correlator is not None:
            logger.info("Transactions: %d closed, %d still open",
                        correlator.closed_count, correlator.open_count)
            correlator.backend.shutdown()


if __name__ == "__main__":
    cli()
