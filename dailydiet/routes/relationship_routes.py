from flask import Blueprint
from dailydiet.controllers.relationship_controller import list_relationships_handler

relationship_bp = Blueprint("relationship", __name__)

# Unfiltered and ungated
@relationship_bp.get("")
def list_relationships():
    return list_relationships_handler()
