"""Built-in marketing word bank."""

from __future__ import annotations

from models import BankEntry

_WORD_BANK: tuple[BankEntry, ...] = (
    BankEntry("CAMPAIGN", "A coordinated marketing effort."),
    BankEntry("BRAND", "Identity that distinguishes a product or company."),
    BankEntry("TARGET", "Intended audience for a marketing message."),
    BankEntry("NICHE", "A specialized segment of the market."),
    BankEntry("ROI", "Return on investment, a key marketing measure."),
    BankEntry("KPI", "A measurable marketing performance indicator."),
    BankEntry("CTA", "Call to action, for short."),
    BankEntry("PPC", "Paid advertising model, for short."),
    BankEntry("AD", "Short for advertisement."),
    BankEntry("LEAD", "A potential customer who has shown interest."),
    BankEntry("FUNNEL", "Path a customer takes from awareness to purchase."),
    BankEntry("SOCIAL", "Type of media platform for online engagement."),
    BankEntry("CONTENT", "Information created for marketing value."),
    BankEntry("EMAIL", "Common channel used for newsletters and campaigns."),
)


def get_word_bank() -> list[BankEntry]:
    """Return a fresh list of the built-in entries."""
    return list(_WORD_BANK)
