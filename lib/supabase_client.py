# =============================================================================
# lib/supabase_client.py - Supabase Client Wrapper
# =============================================================================
# This module provides a typed wrapper for Supabase database, storage and
# auth operations.
#
# One wrapper is built per request from that request's session tokens, so
# every query runs with the caller's JWT and Row Level Security applies.
# Only the anon key is used here.
#
# Usage:
#   from lib.supabase_client import SupabaseClient
#   db = SupabaseClient(access_token=token)
#   rows, count = db.select_rows("news", order_by="date", ascending=False)
# =============================================================================

from __future__ import annotations

import logging
from typing import Any

from supabase import Client, ClientOptions, create_client

from app.config import settings
from core.models.auth import AuthSession

# Set up logging for this module
logger = logging.getLogger(__name__)

# PostgREST code for ".single()" matching no rows
NO_ROWS_CODE = "PGRST116"


class SupabaseClientError(Exception):
    """
    Error during Supabase operations.

    Attributes:
        message: Upstream error text as Supabase reported it
        code: Operation that failed (SELECT_FAILED, STORAGE_UPLOAD_FAILED, ...)
        suggestion: Hint for fixing configuration problems
        details: Table, bucket or row the call was about
    """

    def __init__(
        self,
        message: str,
        code: str = "SUPABASE_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        if self.suggestion:
            return f"[{self.code}] {self.message} ({self.suggestion})"
        return f"[{self.code}] {self.message}"


def _error_message(error: Exception) -> str:
    """Pull the human-readable message out of a PostgREST/storage/auth error."""
    message = getattr(error, "message", None)
    if isinstance(message, str) and message:
        return message
    if error.args and isinstance(error.args[0], dict):
        return str(error.args[0].get("message") or error.args[0])
    return str(error)


def _session_from_sdk(session: Any) -> AuthSession:
    """Convert a supabase-py Session into an AuthSession."""
    user = session.user
    user_dict = user.model_dump(mode="json") if hasattr(user, "model_dump") else dict(user or {})
    return AuthSession(
        user_id=str(user.id),
        email=getattr(user, "email", None),
        access_token=session.access_token,
        refresh_token=session.refresh_token,
        expires_at=getattr(session, "expires_at", None),
        user=user_dict,
    )


class SupabaseClient:
    """
    Request-scoped wrapper around the Supabase SDK client.

    The SDK client is created lazily on first use, with the caller's access
    token as the Authorization header. Every method raises
    SupabaseClientError when Supabase reports an error.

    Example:
        db = SupabaseClient(access_token, refresh_token)
        session = db.get_session()
        if session:
            row = db.insert_row("news", {"title_bg": "..."})
    """

    def __init__(
        self,
        access_token: str | None = None,
        refresh_token: str | None = None,
    ):
        self.access_token = access_token
        self.refresh_token = refresh_token
        self._client: Client | None = None

    def get_client(self) -> Client:
        """
        Get or create the underlying Supabase client.

        Returns:
            Client: Supabase client instance

        Raises:
            SupabaseClientError: If client creation fails
        """
        if self._client is None:
            headers = {}
            if self.access_token:
                headers["Authorization"] = f"Bearer {self.access_token}"
            try:
                self._client = create_client(
                    settings.SUPABASE_URL,
                    settings.SUPABASE_ANON_KEY,
                    options=ClientOptions(
                        headers=headers,
                        auto_refresh_token=False,
                        persist_session=False,
                    ),
                )
            except Exception as e:
                raise SupabaseClientError(
                    message=f"Failed to create Supabase client: {e}",
                    code="CLIENT_INIT_FAILED",
                    suggestion="Check SUPABASE_URL and SUPABASE_ANON_KEY in your .env file"
                )
        return self._client

    # -------------------------------------------------------------------------
    # Table Operations
    # -------------------------------------------------------------------------

    def select_rows(
        self,
        table: str,
        *,
        filters: dict[str, Any] | None = None,
        order_by: str | None = None,
        ascending: bool = True,
        offset: int | None = None,
        limit: int | None = None,
        count: bool = False,
    ) -> tuple[list[dict[str, Any]], int | None]:
        """
        Select rows from a table.

        Equality filters are applied first, then ordering, then the
        [offset, offset + limit - 1] range when a limit is given.

        Args:
            table: Table name
            filters: Column -> value equality filters (None values are skipped)
            order_by: Column to sort by
            ascending: Sort direction
            offset: First row to return (0-based)
            limit: Maximum rows to return
            count: Ask PostgREST for the exact total matching the filters

        Returns:
            Tuple of (rows, total count or None when count=False)
        """
        client = self.get_client()

        if count:
            query = client.table(table).select("*", count="exact")
        else:
            query = client.table(table).select("*")

        for column, value in (filters or {}).items():
            if value is not None:
                query = query.eq(column, value)

        if order_by:
            query = query.order(order_by, desc=not ascending)

        if limit is not None:
            start = offset or 0
            query = query.range(start, start + limit - 1)

        try:
            response = query.execute()
        except Exception as e:
            raise SupabaseClientError(
                message=_error_message(e),
                code="SELECT_FAILED",
                details={"table": table},
            )

        rows = response.data or []
        logger.debug(f"Fetched {len(rows)} rows from {table}")
        return rows, (response.count if count else None)

    def count_rows(self, table: str) -> int:
        """Return the exact number of rows visible in a table."""
        client = self.get_client()

        try:
            response = client.table(table).select("id", count="exact").limit(1).execute()
        except Exception as e:
            raise SupabaseClientError(
                message=_error_message(e),
                code="COUNT_FAILED",
                details={"table": table},
            )

        return response.count or 0

    def fetch_row(self, table: str, row_id: str) -> dict[str, Any] | None:
        """
        Fetch a single row by ID.

        Returns:
            Row dict, or None if not found
        """
        client = self.get_client()

        try:
            response = (
                client.table(table)
                .select("*")
                .eq("id", row_id)
                .single()
                .execute()
            )
            return response.data

        except Exception as e:
            if NO_ROWS_CODE in str(e) or getattr(e, "code", None) == NO_ROWS_CODE:
                return None
            raise SupabaseClientError(
                message=_error_message(e),
                code="FETCH_FAILED",
                details={"table": table, "id": row_id},
            )

    def insert_row(self, table: str, data: dict[str, Any]) -> dict[str, Any]:
        """
        Insert a row and return it as stored (with generated id/timestamps).

        Raises:
            SupabaseClientError: If insert fails or returns nothing
        """
        client = self.get_client()

        try:
            response = client.table(table).insert(data).execute()
        except Exception as e:
            raise SupabaseClientError(
                message=_error_message(e),
                code="INSERT_FAILED",
                details={"table": table},
            )

        if not response.data:
            raise SupabaseClientError(
                message="Insert returned no data",
                code="INSERT_NO_DATA",
                suggestion="Check the table's RLS policies allow the current user to read inserted rows",
                details={"table": table},
            )

        row = response.data[0]
        logger.info(f"Inserted row {row.get('id')} into {table}")
        return row

    def append_row(self, table: str, data: dict[str, Any]) -> None:
        """
        Insert a row without reading it back.

        Used for anonymous submissions, where RLS allows the insert but not
        a select of the new row.
        """
        client = self.get_client()

        try:
            client.table(table).insert(data, returning="minimal").execute()
        except Exception as e:
            raise SupabaseClientError(
                message=_error_message(e),
                code="INSERT_FAILED",
                details={"table": table},
            )

        logger.info(f"Appended row to {table}")

    def update_row(
        self,
        table: str,
        row_id: str,
        data: dict[str, Any],
    ) -> dict[str, Any] | None:
        """
        Update a row by ID.

        Returns:
            Updated row, or None if no row has that ID
        """
        client = self.get_client()

        try:
            response = (
                client.table(table)
                .update(data)
                .eq("id", row_id)
                .execute()
            )
        except Exception as e:
            raise SupabaseClientError(
                message=_error_message(e),
                code="UPDATE_FAILED",
                details={"table": table, "id": row_id},
            )

        if not response.data:
            return None

        logger.info(f"Updated row {row_id} in {table}")
        return response.data[0]

    def delete_row(self, table: str, row_id: str) -> None:
        """Delete a row by ID. Deleting a missing row is not an error."""
        client = self.get_client()

        try:
            client.table(table).delete().eq("id", row_id).execute()
        except Exception as e:
            raise SupabaseClientError(
                message=_error_message(e),
                code="DELETE_FAILED",
                details={"table": table, "id": row_id},
            )

        logger.info(f"Deleted row {row_id} from {table}")

    def update_rows(
        self,
        table: str,
        row_ids: list[str],
        data: dict[str, Any],
    ) -> list[dict[str, Any]]:
        """
        Apply the same update to several rows.

        Returns:
            The rows that were updated (IDs that don't exist are skipped)
        """
        client = self.get_client()

        try:
            response = (
                client.table(table)
                .update(data)
                .in_("id", row_ids)
                .execute()
            )
        except Exception as e:
            raise SupabaseClientError(
                message=_error_message(e),
                code="UPDATE_FAILED",
                details={"table": table, "ids": row_ids},
            )

        rows = response.data or []
        logger.info(f"Updated {len(rows)} row(s) in {table}")
        return rows

    def delete_rows(self, table: str, row_ids: list[str]) -> None:
        """Delete several rows by ID."""
        client = self.get_client()

        try:
            client.table(table).delete().in_("id", row_ids).execute()
        except Exception as e:
            raise SupabaseClientError(
                message=_error_message(e),
                code="DELETE_FAILED",
                details={"table": table, "ids": row_ids},
            )

        logger.info(f"Deleted {len(row_ids)} row(s) from {table}")

    # -------------------------------------------------------------------------
    # Storage Operations
    # -------------------------------------------------------------------------

    def get_bucket(self, bucket: str) -> Any:
        """Look up a storage bucket. Raises SupabaseClientError if missing."""
        client = self.get_client()

        try:
            return client.storage.get_bucket(bucket)
        except Exception as e:
            raise SupabaseClientError(
                message=_error_message(e),
                code="BUCKET_LOOKUP_FAILED",
                details={"bucket": bucket},
            )

    def create_bucket(
        self,
        bucket: str,
        *,
        public: bool = True,
        file_size_limit: int | None = None,
        allowed_mime_types: list[str] | None = None,
    ) -> None:
        """Create a storage bucket."""
        client = self.get_client()

        options: dict[str, Any] = {"public": public}
        if file_size_limit is not None:
            options["file_size_limit"] = file_size_limit
        if allowed_mime_types:
            options["allowed_mime_types"] = allowed_mime_types

        try:
            client.storage.create_bucket(bucket, options=options)
        except Exception as e:
            raise SupabaseClientError(
                message=_error_message(e),
                code="BUCKET_CREATE_FAILED",
                details={"bucket": bucket},
            )

        logger.info(f"Created storage bucket: {bucket}")

    def upload_file(
        self,
        bucket: str,
        path: str,
        content: bytes,
        content_type: str,
        upsert: bool = False,
    ) -> str:
        """
        Upload raw bytes to a bucket.

        Returns:
            The storage path the file was written to
        """
        client = self.get_client()

        try:
            client.storage.from_(bucket).upload(
                path=path,
                file=content,
                file_options={
                    "content-type": content_type,
                    "cache-control": "3600",
                    "upsert": "true" if upsert else "false",
                },
            )
        except Exception as e:
            raise SupabaseClientError(
                message=_error_message(e),
                code="STORAGE_UPLOAD_FAILED",
                details={"bucket": bucket, "path": path},
            )

        logger.info(f"Uploaded {path} to bucket {bucket}")
        return path

    def get_public_url(self, bucket: str, path: str) -> str:
        """Build the public URL of a stored object."""
        client = self.get_client()
        return client.storage.from_(bucket).get_public_url(path)

    def remove_files(self, bucket: str, paths: list[str]) -> None:
        """Remove objects from a bucket."""
        client = self.get_client()

        try:
            client.storage.from_(bucket).remove(paths)
        except Exception as e:
            raise SupabaseClientError(
                message=_error_message(e),
                code="STORAGE_REMOVE_FAILED",
                details={"bucket": bucket, "paths": paths},
            )

        logger.info(f"Removed {len(paths)} file(s) from bucket {bucket}")

    # -------------------------------------------------------------------------
    # Auth Operations
    # -------------------------------------------------------------------------

    def get_session(self) -> AuthSession | None:
        """
        Resolve the caller's session from the request tokens.

        Supabase validates the access token (refreshing it when expired and
        a refresh token is available). Missing, invalid or revoked tokens
        all mean "no session".

        Returns:
            AuthSession, or None when the caller is anonymous
        """
        if not self.access_token:
            return None

        client = self.get_client()

        try:
            response = client.auth.set_session(self.access_token, self.refresh_token or "")
        except Exception as e:
            logger.info(f"Session lookup rejected: {_error_message(e)}")
            return None

        if response is None or response.session is None:
            return None
        return _session_from_sdk(response.session)

    def refresh_session(self, refresh_token: str) -> AuthSession:
        """
        Exchange a refresh token for a new session.

        Raises:
            SupabaseClientError: If Supabase refuses the refresh token
        """
        client = self.get_client()

        try:
            response = client.auth.refresh_session(refresh_token)
        except Exception as e:
            raise SupabaseClientError(
                message=_error_message(e),
                code="SESSION_REFRESH_FAILED",
            )

        if response is None or response.session is None:
            raise SupabaseClientError(
                message="Refresh returned no session",
                code="SESSION_REFRESH_FAILED",
            )
        return _session_from_sdk(response.session)

    def sign_in(self, email: str, password: str) -> AuthSession:
        """
        Sign in with email and password.

        Raises:
            SupabaseClientError: If the credentials are rejected
        """
        client = self.get_client()

        try:
            response = client.auth.sign_in_with_password({"email": email, "password": password})
        except Exception as e:
            raise SupabaseClientError(
                message=_error_message(e),
                code="SIGN_IN_FAILED",
            )

        if response is None or response.session is None:
            raise SupabaseClientError(
                message="Sign-in returned no session",
                code="SIGN_IN_FAILED",
            )

        logger.info(f"User signed in: {email}")
        return _session_from_sdk(response.session)

    def sign_out(self) -> None:
        """Revoke the caller's session on the Supabase side."""
        if not self.access_token:
            return

        client = self.get_client()

        try:
            client.auth.admin.sign_out(self.access_token)
        except Exception as e:
            raise SupabaseClientError(
                message=_error_message(e),
                code="SIGN_OUT_FAILED",
            )
