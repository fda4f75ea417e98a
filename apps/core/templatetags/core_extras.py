from django import template
register = template.Library()


@register.filter
def get_item(dictionary, key):
    """{{ grid.events_by_day|get_item:day }}; int keys may arrive as strings."""
    if not dictionary:
        return None
    val = dictionary.get(key)
    if val is None and str(key).isdigit():
        val = dictionary.get(int(key))
    if val is None:
        val = dictionary.get(str(key))
    return val


@register.filter
def lower_key(dictionary, key):
    """Per-category progress is keyed by the lower-case category name."""
    if not dictionary:
        return 0
    return dictionary.get(str(key).lower(), 0)
