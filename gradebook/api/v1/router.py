from fastapi import APIRouter
from gradebook.api.v1.endpoints import auth
from gradebook.api.v1.endpoints import classes
from gradebook.api.v1.endpoints import leaderboard
from gradebook.api.v1.endpoints import marks
from gradebook.api.v1.endpoints import sessions
from gradebook.api.v1.endpoints import students
from gradebook.api.v1.endpoints import subjects

api_router = APIRouter()

api_router.include_router(auth.router, tags=["auth"])

api_router.include_router(
    sessions.router,
    prefix="/sessions",
    tags=["sessions"]
)

api_router.include_router(
    classes.router,
    prefix="/classes",
    tags=["classes"]
)

api_router.include_router(
    students.router,
    prefix="/students",
    tags=["students"]
)

api_router.include_router(
    subjects.router,
    prefix="/subjects",
    tags=["subjects"]
)

api_router.include_router(
    marks.router,
    prefix="/marks",
    tags=["marks"]
)

api_router.include_router(
    leaderboard.router,
    prefix="/leaderboard",
    tags=["leaderboard"]
)
