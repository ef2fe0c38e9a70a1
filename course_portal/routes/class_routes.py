import logging

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from course_portal.core.errors import internal_error
from course_portal.database import get_db
from course_portal.models.course_class import CourseClass
from course_portal.schemas import RosterResponse, StudentSummary

router = APIRouter(tags=['classes'])

logger = logging.getLogger(__name__)


@router.get('/{course_id}', response_model=RosterResponse)
def get_students(course_id: str, db: Session = Depends(get_db)):
    try:
        course_class = db.query(CourseClass).filter(CourseClass.course == course_id).first()
        students = list(course_class.students) if course_class else []
    except SQLAlchemyError as exc:
        logger.exception('Could not load roster for course %s', course_id)
        raise internal_error() from exc

    return RosterResponse(students=[StudentSummary.model_validate(student) for student in students])
