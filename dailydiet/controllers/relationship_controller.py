from dailydiet.extensions import db
from dailydiet.services.snack_service import list_links
from dailydiet.utils.http import ok


def list_relationships_handler():
    links = list_links(db.session)
    return ok({"relship": [link.to_dict() for link in links]})
