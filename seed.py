import datetime as dt
from dailydiet import create_app
from dailydiet.extensions import db
from dailydiet.models.user import User
from dailydiet.services.user_service import create_user
from dailydiet.services.snack_service import create_snack

DEMO_SESSION_ID = "00000000-0000-4000-8000-000000000001"

app = create_app()

with app.app_context():
    # ensure tables exist (non-destructive: won't alter existing columns)
    db.create_all()

    user = User.query.filter_by(session_id=DEMO_SESSION_ID, name="Demo User").first()
    if not user:
        user = create_user(db.session, DEMO_SESSION_ID, name="Demo User", age=30, height=175, weight=72)
        print(f"Created demo user {user.id}")

        today = dt.date.today()
        for days_ago, title, at_diet in [
            (2, "Oatmeal", True),
            (2, "Chocolate bar", False),
            (1, "Apple", True),
            (1, "Salad", True),
            (0, "Yogurt", True),
        ]:
            create_snack(
                db.session, DEMO_SESSION_ID, user.id,
                title=title,
                description=f"{title} logged by seed",
                at_diet=at_diet,
                date=today - dt.timedelta(days=days_ago),
                time=dt.time(10, 0),
            )
        print("Created demo snacks")
    else:
        print("Demo user already exists")

    print(f"Use cookie sessionId={DEMO_SESSION_ID}")
