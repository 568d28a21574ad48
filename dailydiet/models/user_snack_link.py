from uuid import uuid4
from dailydiet.extensions import db

class UserSnackLink(db.Model):
    """Join row tying one logged snack to the user it belongs to."""
    __tablename__ = "relusersnack"

    id = db.Column("idRel", db.String(36), primary_key=True, default=lambda: str(uuid4()))
    user_id = db.Column("userId", db.String(36), db.ForeignKey("users.id"), nullable=False, index=True)
    snack_id = db.Column(
        "snackId", db.String(36), db.ForeignKey("snack.id", ondelete="CASCADE"), nullable=False, index=True
    )

    def to_dict(self):
        return {
            "idRel": self.id,
            "userId": self.user_id,
            "snackId": self.snack_id,
        }
