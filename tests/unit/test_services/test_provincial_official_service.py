"""Tests for the provincial official service layer.

Runs against in-memory SQLite with a temporary upload directory so both
the row and the file side of each operation can be asserted.
"""

import uuid
from pathlib import Path

import pytest
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from provincial_admin.lib.uploads.storage import ImageUpload, LocalImageStorage
from provincial_admin.models.provincial_official import OFFICIAL_POSITIONS, OfficialPosition, ProvincialOfficial
from provincial_admin.services.provincial_official_service import (
    OfficialForm,
    OfficialValidationError,
    create_official,
    delete_official,
    get_official,
    list_officials,
    update_official,
    validate_official_form,
)


async def _count(session: AsyncSession) -> int:
    return (await session.execute(select(func.count(ProvincialOfficial.id)))).scalar_one()


async def _create(
    session: AsyncSession,
    storage: LocalImageStorage,
    name: str,
    position: str = "Governor",
    image: ImageUpload | None = None,
) -> ProvincialOfficial:
    return await create_official(session, storage, OfficialForm(name=name, position=position, image=image))


class TestPositions:
    def test_eight_fixed_positions_in_order(self) -> None:
        assert OFFICIAL_POSITIONS == (
            "Governor",
            "Vice Governor",
            "Member, 1st District",
            "Member, 2nd District",
            "Member, 3rd District",
            "President PCL Bohol Federation",
            "Liga ng mga Barangay",
            "SK Federation President",
        )

    def test_enum_members_are_strings(self) -> None:
        assert OfficialPosition.GOVERNOR == "Governor"


class TestValidateOfficialForm:
    """Tests for validate_official_form."""

    def test_valid_without_image(self) -> None:
        form = validate_official_form("  Juan Dela Cruz ", " Governor ")
        assert form == OfficialForm(name="Juan Dela Cruz", position="Governor", image=None)

    def test_valid_with_image(self, png_upload: ImageUpload) -> None:
        form = validate_official_form("Juan", "Governor", png_upload)
        assert form.image is png_upload

    def test_missing_position(self) -> None:
        with pytest.raises(OfficialValidationError) as exc_info:
            validate_official_form("Juan", None)
        assert exc_info.value.errors == {"position": ["The position field is required."]}

    def test_blank_name_and_position_reported_per_field(self) -> None:
        with pytest.raises(OfficialValidationError) as exc_info:
            validate_official_form("   ", "")
        assert set(exc_info.value.errors) == {"name", "position"}

    def test_validation_error_is_value_error(self) -> None:
        with pytest.raises(ValueError, match="name"):
            validate_official_form(None, "Governor")

    def test_bmp_rejected(self) -> None:
        bmp = ImageUpload(content=b"BM\x00\x00", filename="photo.bmp", content_type="image/bmp")
        with pytest.raises(OfficialValidationError) as exc_info:
            validate_official_form("Juan", "Governor", bmp)
        messages = exc_info.value.errors["profile_image"]
        assert any("must be a file of type" in m for m in messages)

    def test_non_image_rejected(self) -> None:
        pdf = ImageUpload(content=b"%PDF", filename="cv.pdf", content_type="application/pdf")
        with pytest.raises(OfficialValidationError) as exc_info:
            validate_official_form("Juan", "Governor", pdf)
        assert "The profile image field must be an image." in exc_info.value.errors["profile_image"]

    def test_mismatched_extension_rejected(self) -> None:
        upload = ImageUpload(content=b"x", filename="photo.bmp", content_type="image/png")
        with pytest.raises(OfficialValidationError):
            validate_official_form("Juan", "Governor", upload)

    def test_oversized_image_rejected(self) -> None:
        big = ImageUpload(content=b"\x00" * (5120 * 1024 + 1), filename="big.png", content_type="image/png")
        with pytest.raises(OfficialValidationError) as exc_info:
            validate_official_form("Juan", "Governor", big)
        assert exc_info.value.errors["profile_image"] == [
            "The profile image field must not be greater than 5120 kilobytes."
        ]

    def test_image_at_limit_accepted(self) -> None:
        exact = ImageUpload(content=b"\x00" * (5120 * 1024), filename="big.gif", content_type="image/gif")
        assert validate_official_form("Juan", "Governor", exact).image is exact

    def test_empty_upload_treated_as_absent(self) -> None:
        empty = ImageUpload(content=b"", filename="", content_type="application/octet-stream")
        assert validate_official_form("Juan", "Governor", empty).image is None

    def test_free_text_position_allowed_by_default(self) -> None:
        assert validate_official_form("Juan", "Board Secretary").position == "Board Secretary"

    def test_strict_positions(self) -> None:
        with pytest.raises(OfficialValidationError) as exc_info:
            validate_official_form("Juan", "Board Secretary", strict_positions=True)
        assert exc_info.value.errors == {"position": ["The selected position is invalid."]}
        assert validate_official_form("Juan", "Vice Governor", strict_positions=True).position == "Vice Governor"


class TestListOfficials:
    """Tests for list_officials filtering."""

    @pytest.fixture
    async def seeded(self, async_session: AsyncSession, storage: LocalImageStorage) -> None:
        await _create(async_session, storage, "Juan Dela Cruz", "Governor")
        await _create(async_session, storage, "Maria Clara", "Vice Governor")
        await _create(async_session, storage, "ANA Reyes", "Member, 1st District")
        await _create(async_session, storage, "Pedro Penduko", "Governor")

    @pytest.mark.asyncio
    async def test_no_filters_returns_all(self, async_session: AsyncSession, seeded: None) -> None:
        officials = await list_officials(async_session)
        assert len(officials) == 4

    @pytest.mark.asyncio
    async def test_position_exact_match(self, async_session: AsyncSession, seeded: None) -> None:
        officials = await list_officials(async_session, position="Governor")
        assert {o.name for o in officials} == {"Juan Dela Cruz", "Pedro Penduko"}
        assert all(o.position == "Governor" for o in officials)

    @pytest.mark.asyncio
    async def test_search_case_insensitive_substring(self, async_session: AsyncSession, seeded: None) -> None:
        officials = await list_officials(async_session, search="an")
        assert {o.name for o in officials} == {"Juan Dela Cruz", "ANA Reyes"}

    @pytest.mark.asyncio
    async def test_search_and_position_combined(self, async_session: AsyncSession, seeded: None) -> None:
        officials = await list_officials(async_session, position="Governor", search="an")
        assert [o.name for o in officials] == ["Juan Dela Cruz"]

    @pytest.mark.asyncio
    async def test_blank_filters_ignored(self, async_session: AsyncSession, seeded: None) -> None:
        officials = await list_officials(async_session, position="  ", search="")
        assert len(officials) == 4

    @pytest.mark.asyncio
    async def test_wildcards_are_literal(self, async_session: AsyncSession, seeded: None) -> None:
        assert await list_officials(async_session, search="%") == []
        assert await list_officials(async_session, search="_") == []

    @pytest.mark.asyncio
    async def test_filters_not_trimmed(self, async_session: AsyncSession, seeded: None) -> None:
        officials = await list_officials(async_session, search="an ")
        assert [o.name for o in officials] == ["Juan Dela Cruz"]
        assert await list_officials(async_session, position="Governor ") == []


class TestGetOfficial:
    @pytest.mark.asyncio
    async def test_returns_none_when_not_found(self, async_session: AsyncSession) -> None:
        assert await get_official(async_session, uuid.uuid4()) is None

    @pytest.mark.asyncio
    async def test_returns_official(self, async_session: AsyncSession, storage: LocalImageStorage) -> None:
        official = await _create(async_session, storage, "Juan")
        found = await get_official(async_session, official.id)
        assert found is not None
        assert found.name == "Juan"


class TestCreateOfficial:
    """Tests for create_official."""

    @pytest.mark.asyncio
    async def test_without_image(self, async_session: AsyncSession, storage: LocalImageStorage, upload_dir: Path) -> None:
        official = await _create(async_session, storage, "Juan")
        assert official.id is not None
        assert official.profile_image is None
        assert official.created_at is not None
        assert upload_dir.is_dir()
        assert list(upload_dir.iterdir()) == []

    @pytest.mark.asyncio
    async def test_with_image(
        self, async_session: AsyncSession, storage: LocalImageStorage, upload_dir: Path, png_upload: ImageUpload
    ) -> None:
        official = await _create(async_session, storage, "Juan", image=png_upload)
        assert official.profile_image is not None
        assert official.profile_image.endswith(".png")
        assert len(official.profile_image) == 20 + len(".png")
        assert (upload_dir / official.profile_image).read_bytes() == png_upload.content

    @pytest.mark.asyncio
    async def test_failed_validation_creates_nothing(
        self, async_session: AsyncSession, upload_dir: Path, png_upload: ImageUpload
    ) -> None:
        """Validation runs before any file or row is written."""
        with pytest.raises(OfficialValidationError):
            validate_official_form("Juan", None, png_upload)
        assert await _count(async_session) == 0
        assert not upload_dir.exists()


class TestUpdateOfficial:
    """Tests for update_official image handling."""

    @pytest.mark.asyncio
    async def test_new_image_replaces_old(
        self,
        async_session: AsyncSession,
        storage: LocalImageStorage,
        upload_dir: Path,
        png_upload: ImageUpload,
        jpeg_upload: ImageUpload,
    ) -> None:
        official = await _create(async_session, storage, "Juan", image=png_upload)
        old_name = official.profile_image

        updated = await update_official(
            async_session, storage, official, OfficialForm(name="Juan", position="Governor", image=jpeg_upload)
        )

        assert updated.profile_image != old_name
        assert updated.profile_image.endswith(".jpeg")
        assert not (upload_dir / old_name).exists()
        assert (upload_dir / updated.profile_image).exists()

    @pytest.mark.asyncio
    async def test_new_image_when_none_owned(
        self, async_session: AsyncSession, storage: LocalImageStorage, upload_dir: Path, png_upload: ImageUpload
    ) -> None:
        official = await _create(async_session, storage, "Juan")
        updated = await update_official(
            async_session, storage, official, OfficialForm(name="Juan", position="Governor", image=png_upload)
        )
        assert (upload_dir / updated.profile_image).exists()

    @pytest.mark.asyncio
    async def test_new_image_when_old_file_missing(
        self, async_session: AsyncSession, storage: LocalImageStorage, upload_dir: Path, png_upload: ImageUpload
    ) -> None:
        official = await _create(async_session, storage, "Juan", image=png_upload)
        (upload_dir / official.profile_image).unlink()

        updated = await update_official(
            async_session, storage, official, OfficialForm(name="Juan", position="Governor", image=png_upload)
        )
        assert (upload_dir / updated.profile_image).exists()

    @pytest.mark.asyncio
    async def test_remove_image(
        self, async_session: AsyncSession, storage: LocalImageStorage, upload_dir: Path, png_upload: ImageUpload
    ) -> None:
        official = await _create(async_session, storage, "Juan", image=png_upload)
        old_name = official.profile_image

        updated = await update_official(
            async_session, storage, official, OfficialForm(name="Juan", position="Governor"), remove_image=True
        )

        assert updated.profile_image is None
        assert not (upload_dir / old_name).exists()

    @pytest.mark.asyncio
    async def test_new_image_wins_over_remove_flag(
        self,
        async_session: AsyncSession,
        storage: LocalImageStorage,
        upload_dir: Path,
        png_upload: ImageUpload,
        jpeg_upload: ImageUpload,
    ) -> None:
        official = await _create(async_session, storage, "Juan", image=png_upload)
        updated = await update_official(
            async_session,
            storage,
            official,
            OfficialForm(name="Juan", position="Governor", image=jpeg_upload),
            remove_image=True,
        )
        assert updated.profile_image is not None
        assert (upload_dir / updated.profile_image).exists()

    @pytest.mark.asyncio
    async def test_keeps_image_and_updates_fields(
        self, async_session: AsyncSession, storage: LocalImageStorage, upload_dir: Path, png_upload: ImageUpload
    ) -> None:
        official = await _create(async_session, storage, "Juan", image=png_upload)
        old_name = official.profile_image

        updated = await update_official(
            async_session, storage, official, OfficialForm(name="Juan Luna", position="Vice Governor")
        )

        assert updated.name == "Juan Luna"
        assert updated.position == "Vice Governor"
        assert updated.profile_image == old_name
        assert (upload_dir / old_name).exists()

        reloaded = await get_official(async_session, official.id)
        assert reloaded is not None
        assert reloaded.position == "Vice Governor"


class TestDeleteOfficial:
    """Tests for delete_official."""

    @pytest.mark.asyncio
    async def test_deletes_row_and_file(
        self, async_session: AsyncSession, storage: LocalImageStorage, upload_dir: Path, png_upload: ImageUpload
    ) -> None:
        official = await _create(async_session, storage, "Juan", image=png_upload)
        official_id, name = official.id, official.profile_image

        await delete_official(async_session, storage, official)

        assert await get_official(async_session, official_id) is None
        assert not (upload_dir / name).exists()

    @pytest.mark.asyncio
    async def test_deletes_row_without_image(self, async_session: AsyncSession, storage: LocalImageStorage) -> None:
        official = await _create(async_session, storage, "Juan")
        await delete_official(async_session, storage, official)
        assert await _count(async_session) == 0

    @pytest.mark.asyncio
    async def test_missing_file_is_ignored(
        self, async_session: AsyncSession, storage: LocalImageStorage, upload_dir: Path, png_upload: ImageUpload
    ) -> None:
        official = await _create(async_session, storage, "Juan", image=png_upload)
        (upload_dir / official.profile_image).unlink()

        await delete_official(async_session, storage, official)
        assert await _count(async_session) == 0
