from sqlalchemy.orm import declarative_base

Base = declarative_base()
import school_api.models.school
