"""
Text in and text out for the chat front end.

`/query` arguments look like ``тип ГМ дата 01.01.2025`` or ``тк 12345``;
the keywords can come in any order and any combination.
"""

import re

from .dates import parse_date
from .exceptions import InvalidQueryError
from .models import HighlightOutcome, IngestResult, QueryFilter, QueryResult

date_arg_regex: re.Pattern = re.compile(r"дата\s+(\S+)", re.IGNORECASE)
type_arg_regex: re.Pattern = re.compile(
    r"тип\s+(ГМ\+СМ|ГМ|СМ|Частично\s*ГМ|Частично\s*СМ)", re.IGNORECASE
)
tk_arg_regex: re.Pattern = re.compile(r"тк\s+(\d+)", re.IGNORECASE)

MAX_LISTED = 10


def parse_query_args(args_text: str) -> QueryFilter:
    query_filter = QueryFilter()
    if match := date_arg_regex.search(args_text):
        if parse_date(match.group(1)) is None:
            raise InvalidQueryError(
                f'Неверный формат даты: "{match.group(1)}"\n\n'
                "Используйте формат: ДД.ММ.ГГГГ\n"
                "Пример: /query дата 25.12.2024",
                context={"date": match.group(1)},
            )
        query_filter.date = match.group(1)
    if match := type_arg_regex.search(args_text):
        query_filter.tk_type = match.group(1)
    if match := tk_arg_regex.search(args_text):
        query_filter.tk_number = match.group(1)

    if query_filter.is_empty:
        raise InvalidQueryError(
            "Не удалось распознать фильтры.\n\n"
            "Примеры использования:\n"
            "• /query дата 25.12.2024\n"
            "• /query тип ГМ\n"
            "• /query тк 12345"
        )
    return query_filter


def format_duration(total_seconds: float) -> str:
    minutes = int(total_seconds // 60)
    seconds = round(total_seconds % 60)
    if minutes > 0:
        return f"{minutes} мин {seconds} сек"
    return f"{seconds} сек"


def _describe_filter(query_filter: QueryFilter) -> list[str]:
    filter_desc = []
    if query_filter.date:
        filter_desc.append(f"Дата: {query_filter.date}")
    if query_filter.tk_type:
        filter_desc.append(f"Тип ТК: {query_filter.tk_type}")
    if query_filter.tk_number:
        filter_desc.append(f"Номер ТК: {query_filter.tk_number}")
    return filter_desc


def _format_number(value: float) -> str:
    return f"{value:g}"


def format_query_result(query_filter: QueryFilter, result: QueryResult) -> str:
    lines = ["📊 Результат запроса", "", "Фильтры:"]
    lines += [f"• {desc}" for desc in _describe_filter(query_filter)]
    lines.append("")

    if result.count == 0:
        lines.append("❌ Ролики не найдены по указанным критериям.")
        return "\n".join(lines)

    lines.append(f"Найдено роликов: {result.count}")
    lines.append(
        f"Общая длительность: {_format_number(result.total_duration)} сек "
        f"({format_duration(result.total_duration)})"
    )
    lines.append("")
    if result.count <= MAX_LISTED:
        lines.append("Список роликов:")
    else:
        lines.append(f"Показаны первые {MAX_LISTED} из {result.count} роликов:")
    for record in result.records[:MAX_LISTED]:
        if record.start_date and record.end_date:
            dates = f"{record.start_date} - {record.end_date}"
        else:
            dates = record.start_date or record.end_date or "Дата не указана"
        lines.append(
            f"• {record.campaign_name} | {_format_number(record.duration)} сек"
            f" | {record.tk_type} | {dates}"
        )
    return "\n".join(lines)


def format_ingest_result(ingest_result: IngestResult) -> str:
    return (
        "📋 Найдено в файле:\n"
        f"• РК: {ingest_result.campaign_name}\n"
        f"• Количество уникальных ТК: {len(ingest_result.tk_numbers)}"
    )


def format_highlight_result(outcome: HighlightOutcome) -> str:
    message = f"✅ Готово!\n\n📊 Результат:\n• Выделено ячеек: {outcome.highlighted}"
    if outcome.not_found:
        message += f"\n\n⚠️ Не найдены ТК ({len(outcome.not_found)}):\n"
        message += "\n".join(f"• {tk}" for tk in outcome.not_found[:MAX_LISTED])
        if len(outcome.not_found) > MAX_LISTED:
            message += f"\n... и ещё {len(outcome.not_found) - MAX_LISTED}"
    return message
