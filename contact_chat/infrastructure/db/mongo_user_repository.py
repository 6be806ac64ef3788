# Standard library imports
import logging
from datetime import datetime
from typing import Dict, List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ASCENDING
from pymongo.errors import DuplicateKeyError

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User, normalize_email
from ...domain.models.contact import ContactSummary
from ...domain.constants import UserFields
from ...domain.exceptions import DatabaseError, DuplicateEmail
from ...utils.datetime_utils import ensure_utc
from .mongo_connection import get_user_collection

logger = logging.getLogger(__name__)

# Fields an update through save() never touches
UPDATE_EXCLUDED_FIELDS = (
    UserFields.MONGO_ID,
    UserFields.CONTACTS,
    UserFields.CREATED_AT,
    UserFields.SESSION_SECRET,
    UserFields.LAST_ACCESSED,
)


def _to_object_id(value: Optional[str]) -> Optional[ObjectId]:
    if not value:
        return None
    try:
        return ObjectId(value)
    except (InvalidId, ValueError, TypeError):
        return None


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""

    def __init__(self, user_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.user_collection = user_collection if user_collection is not None else get_user_collection()

    async def ensure_indexes(self) -> None:
        """
        Create the indexes backing user invariants:
        - unique email
        - unique session secret, only over documents that currently hold one
        """
        try:
            await self.user_collection.create_index(
                [(UserFields.EMAIL, ASCENDING)],
                unique=True,
                name="email_unique",
            )
            await self.user_collection.create_index(
                [(UserFields.SESSION_SECRET, ASCENDING)],
                unique=True,
                partialFilterExpression={UserFields.SESSION_SECRET: {"$type": "string"}},
                name="session_secret_unique",
            )
        except Exception as e:
            raise DatabaseError(f"Error creating user indexes: {str(e)}")
        logger.info("User collection indexes ensured")

    async def find_by_email(self, email: str) -> Optional[User]:
        """
        Find user by email address

        Args:
            email: Email address to search for (normalized before lookup)

        Returns:
            User domain model if found, None otherwise
        """
        email = normalize_email(email)
        if not email:
            return None

        try:
            document = await self.user_collection.find_one({UserFields.EMAIL: email})
            if document is None:
                return None
            return self._document_to_user(document)
        except Exception as e:
            raise DatabaseError(f"Error finding user by email: {str(e)}")

    async def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Find user by ID

        Args:
            user_id: User ID to search for

        Returns:
            User domain model if found, None otherwise
        """
        object_id = _to_object_id(user_id)
        if object_id is None:
            return None

        try:
            document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id})
            if document is None:
                return None
            return self._document_to_user(document)
        except Exception as e:
            raise DatabaseError(f"Error finding user by ID: {str(e)}")

    async def find_by_session_secret(self, session_secret: str) -> Optional[User]:
        """
        Find the user holding a session secret

        Args:
            session_secret: Session secret to search for

        Returns:
            User domain model if found, None otherwise
        """
        if not session_secret or not isinstance(session_secret, str):
            return None

        try:
            document = await self.user_collection.find_one({UserFields.SESSION_SECRET: session_secret})
            if document is None:
                return None
            return self._document_to_user(document)
        except Exception as e:
            raise DatabaseError(f"Error finding user by session: {str(e)}")

    async def save(self, user: User) -> User:
        """
        Save user (create new or update existing)

        The contacts array and the session fields are written on insert only;
        afterwards they change through push_contact and the *_session methods,
        so a stale in-memory user never undoes a concurrent append or logout.

        Args:
            user: User domain model to save

        Returns:
            Saved User domain model with ID set
        """
        if not user:
            raise ValueError("User cannot be None")

        user_dict = self._user_to_dict(user)

        if user.id:
            object_id = _to_object_id(user.id)
            if object_id is None:
                raise ValueError(f"Invalid user ID format: {user.id}")

            update_fields = {
                k: v for k, v in user_dict.items()
                if k not in UPDATE_EXCLUDED_FIELDS
            }
            try:
                update_result = await self.user_collection.update_one(
                    {UserFields.MONGO_ID: object_id},
                    {"$set": update_fields}
                )
            except DuplicateKeyError as e:
                raise self._duplicate_key_error(e, user)
            except Exception as e:
                raise DatabaseError(f"Error saving user: {str(e)}")

            if update_result.matched_count == 0:
                raise ValueError(f"User with ID {user.id} not found")

            try:
                updated_document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id})
            except Exception as e:
                raise DatabaseError(f"Error saving user: {str(e)}")
            if updated_document is None:
                raise DatabaseError(f"User {user.id} was updated but could not be retrieved")
            return self._document_to_user(updated_document)

        # Create new user
        user_dict.pop(UserFields.MONGO_ID, None)
        try:
            result = await self.user_collection.insert_one(user_dict)
            new_document = await self.user_collection.find_one({UserFields.MONGO_ID: result.inserted_id})
        except DuplicateKeyError as e:
            raise self._duplicate_key_error(e, user)
        except Exception as e:
            raise DatabaseError(f"Error saving user: {str(e)}")

        if new_document is None:
            raise DatabaseError("User was created but could not be retrieved")
        return self._document_to_user(new_document)

    async def start_session(self, user_id: str, session_secret: str, now: datetime) -> bool:
        """
        Store a new session secret for a user, replacing any previous one

        Returns:
            True if the user was found and updated, False otherwise
        """
        object_id = _to_object_id(user_id)
        if object_id is None or not session_secret:
            return False

        try:
            update_result = await self.user_collection.update_one(
                {UserFields.MONGO_ID: object_id},
                {"$set": {
                    UserFields.SESSION_SECRET: session_secret,
                    UserFields.LAST_ACCESSED: now,
                    UserFields.UPDATED_AT: now,
                }}
            )
        except Exception as e:
            raise DatabaseError(f"Error starting session: {str(e)}")
        return update_result.matched_count > 0

    async def touch_session(self, session_secret: str, now: datetime, active_since: datetime) -> bool:
        """
        Refresh last_accessed of a still-live session

        The filter carries both the secret and the expiry bound, so a session
        that was cleared or has expired in the meantime is left untouched.

        Returns:
            True if a live session was refreshed, False otherwise
        """
        if not session_secret or not isinstance(session_secret, str):
            return False

        try:
            update_result = await self.user_collection.update_one(
                {
                    UserFields.SESSION_SECRET: session_secret,
                    UserFields.LAST_ACCESSED: {"$gte": active_since},
                },
                {"$set": {UserFields.LAST_ACCESSED: now, UserFields.UPDATED_AT: now}}
            )
        except Exception as e:
            raise DatabaseError(f"Error refreshing session: {str(e)}")
        return update_result.matched_count > 0

    async def clear_session(self, session_secret: str, now: datetime) -> bool:
        """
        Clear a session secret

        Returns:
            True if a user held the secret and it was cleared, False otherwise
        """
        if not session_secret or not isinstance(session_secret, str):
            return False

        try:
            update_result = await self.user_collection.update_one(
                {UserFields.SESSION_SECRET: session_secret},
                {"$set": {
                    UserFields.SESSION_SECRET: None,
                    UserFields.LAST_ACCESSED: now,
                    UserFields.UPDATED_AT: now,
                }}
            )
        except Exception as e:
            raise DatabaseError(f"Error clearing session: {str(e)}")
        return update_result.matched_count > 0

    async def push_contact(self, user_id: str, contact_id: str) -> bool:
        """
        Append a contact reference with a single atomic $push

        Args:
            user_id: ID of the user owning the contact list
            contact_id: ID of the user being added

        Returns:
            True if the owning user was found and updated, False otherwise
        """
        user_object_id = _to_object_id(user_id)
        contact_object_id = _to_object_id(contact_id)
        if user_object_id is None or contact_object_id is None:
            return False

        try:
            update_result = await self.user_collection.update_one(
                {UserFields.MONGO_ID: user_object_id},
                {
                    "$push": {UserFields.CONTACTS: contact_object_id},
                    "$currentDate": {UserFields.UPDATED_AT: True},
                }
            )
        except Exception as e:
            raise DatabaseError(f"Error adding contact: {str(e)}")
        return update_result.matched_count > 0

    async def find_contact_summaries(self, contact_ids: List[str]) -> List[ContactSummary]:
        """
        Resolve contact IDs to name/surname projections

        Args:
            contact_ids: Ordered contact IDs (may contain duplicates)

        Returns:
            One ContactSummary per resolvable ID, in the given order
        """
        object_ids = [oid for oid in (_to_object_id(cid) for cid in contact_ids) if oid is not None]
        if not object_ids:
            return []

        try:
            cursor = self.user_collection.find(
                {UserFields.MONGO_ID: {"$in": list(set(object_ids))}},
                {UserFields.NAME: 1, UserFields.SURNAME: 1},
            )
            summaries: Dict[ObjectId, ContactSummary] = {}
            async for document in cursor:
                summaries[document[UserFields.MONGO_ID]] = ContactSummary(
                    name=document.get(UserFields.NAME, ""),
                    surname=document.get(UserFields.SURNAME, ""),
                )
        except Exception as e:
            raise DatabaseError(f"Error listing contacts: {str(e)}")

        return [summaries[oid] for oid in object_ids if oid in summaries]

    def _duplicate_key_error(self, error: DuplicateKeyError, user: User) -> Exception:
        key_pattern = (error.details or {}).get("keyPattern") or {}
        if UserFields.EMAIL in key_pattern:
            return DuplicateEmail(user.email)
        return DatabaseError(f"Duplicate key while saving user: {str(error)}")

    def _document_to_user(self, document: dict) -> User:
        """
        Convert MongoDB document to User domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            User domain model
        """
        if not document or UserFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")

        return User(
            id=str(document[UserFields.MONGO_ID]),
            name=document.get(UserFields.NAME, ""),
            surname=document.get(UserFields.SURNAME, ""),
            email=document.get(UserFields.EMAIL, ""),
            password=document.get(UserFields.PASSWORD, ""),
            bio=document.get(UserFields.BIO),
            session_secret=document.get(UserFields.SESSION_SECRET),
            last_accessed=ensure_utc(document.get(UserFields.LAST_ACCESSED)),
            contacts=[str(contact_id) for contact_id in document.get(UserFields.CONTACTS, [])],
            created_at=ensure_utc(document.get(UserFields.CREATED_AT)),
            updated_at=ensure_utc(document.get(UserFields.UPDATED_AT)),
        )

    def _user_to_dict(self, user: User) -> dict:
        """
        Convert User domain model to MongoDB document

        Args:
            user: User domain model

        Returns:
            Dictionary ready for MongoDB storage
        """
        if not user:
            raise ValueError("User cannot be None")

        user_dict = {
            UserFields.NAME: user.name,
            UserFields.SURNAME: user.surname,
            UserFields.EMAIL: user.email,
            UserFields.BIO: user.bio,
            UserFields.PASSWORD: user.password,
            UserFields.SESSION_SECRET: user.session_secret,
            UserFields.LAST_ACCESSED: user.last_accessed,
            UserFields.CONTACTS: [
                oid for oid in (_to_object_id(cid) for cid in user.contacts) if oid is not None
            ],
            UserFields.CREATED_AT: user.created_at,
            UserFields.UPDATED_AT: user.updated_at,
        }

        # Only include _id if user.id is valid
        object_id = _to_object_id(user.id)
        if object_id is not None:
            user_dict[UserFields.MONGO_ID] = object_id

        return user_dict
