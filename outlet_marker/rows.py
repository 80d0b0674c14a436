from .models import CampaignRow


def normalize_name(value) -> str:
    return str(value).strip().casefold()


def find_row(column_a_values: list, campaign_name: str) -> CampaignRow | None:
    """First 1-based row whose value equals `campaign_name`, ignoring case and
    surrounding whitespace. No partial matches."""
    normalized_search = normalize_name(campaign_name)
    for index, value in enumerate(column_a_values):
        if value is None or value == "":
            continue
        if normalize_name(value) == normalized_search:
            return CampaignRow(row_number=index + 1, value=str(value))
    return None
