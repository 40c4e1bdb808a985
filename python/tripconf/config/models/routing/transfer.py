"""Mapping of the transfer preferences of a route request."""

from __future__ import annotations

from tripconf.config.node import ConfigNode
from tripconf.config.version import NA, V2_0

from .preferences import TransferPreferences

__all__ = ["map_transfer_preferences"]


def map_transfer_preferences(c: ConfigNode, target: TransferPreferences) -> None:
    """Map the transfer costs and slack of request ``c`` into ``target``."""
    dft = TransferPreferences()
    target.cost = (
        c.of("transferPenalty")
        .since(NA)
        .summary("An additional penalty added to boardings after the first.")
        .description(
            """
            The value is in OTP's internal weight units, which are roughly
            equivalent to seconds. Set this to a high value to discourage
            transfers. Of course, transfers that save significant time or
            walking will still be taken.
            """
        )
        .as_int(dft.cost)
    )
    target.slack = (
        c.of("transferSlack")
        .since(NA)
        .summary(
            "The extra time needed to make a safe transfer in seconds."
        )
        .description(
            """
            An expected transfer time in seconds that specifies the amount of
            time that must pass between exiting one public transport vehicle
            and boarding another. This time is in addition to time it might
            take to walk between stops, the board-slack, and the alight-slack.
            """
        )
        .as_int(dft.slack)
    )
    target.wait_reluctance = (
        c.of("waitReluctance")
        .since(NA)
        .summary(
            "How much worse is waiting for a transit vehicle than being on a "
            "transit vehicle, as a multiplier."
        )
        .as_double(dft.wait_reluctance)
    )
    target.nonpreferred_cost = (
        c.of("nonpreferredTransferPenalty")
        .since(V2_0)
        .summary("Penalty (in seconds) for using a non-preferred transfer.")
        .as_int(dft.nonpreferred_cost)
    )
    target.max_transfers = (
        c.of("maxTransfers")
        .since(V2_0)
        .summary("Maximum number of transfers.")
        .as_int(dft.max_transfers)
    )
