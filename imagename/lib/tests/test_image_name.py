"""Tests for composing, validating and repairing full image names."""

import pytest

from ..errors import InvalidNamePartError, MalformedImageNameError
from ..image_name import ImageName
from ..parts import NamespaceName, RegistryName, RepositoryName, TagName


class TestConstruction:
    """Tests for building image names."""

    def test_chain_string_construction(self):
        """Parts set from strings render in canonical order."""
        image = (
            ImageName()
            .with_namespace("library")
            .with_repository("ubuntu")
            .with_registry("docker.io")
            .with_tag("trusty")
        )

        assert str(image) == "docker.io/library/ubuntu:trusty"
        assert str(image.make_valid()) == "docker.io/library/ubuntu:trusty"

    def test_chain_part_construction(self):
        """Parts set from part objects are used as-is."""
        repository = RepositoryName("ubuntu")
        image = (
            ImageName()
            .with_namespace(NamespaceName("library"))
            .with_repository(repository)
            .with_registry(RegistryName("docker.io"))
            .with_tag(TagName("trusty"))
        )

        assert image.repository is repository
        assert str(image) == "docker.io/library/ubuntu:trusty"
        assert str(image.make_valid()) == "docker.io/library/ubuntu:trusty"

    def test_string_construction(self):
        """Parsing and rendering a valid name gives it back."""
        image = ImageName("docker.io/library/ubuntu:trusty")

        assert str(image) == "docker.io/library/ubuntu:trusty"
        assert str(image.make_valid()) == "docker.io/library/ubuntu:trusty"

    def test_parse_is_the_same_as_construction(self):
        """ImageName.parse splits the name like the constructor."""
        image = ImageName.parse("library/ubuntu:latest")

        assert isinstance(image, ImageName)
        assert str(image.namespace) == "library"
        assert str(image.tag) == "latest"

    @pytest.mark.parametrize("image_name", ["", None])
    def test_empty_image(self, image_name):
        """Empty or missing input gives an image name with no parts."""
        image = ImageName.parse(image_name)

        assert image.registry is None
        assert image.namespace is None
        assert image.repository is None
        assert image.tag is None
        assert str(image) == ""

    def test_only_slashes_is_malformed(self):
        """A name made only of slashes cannot be parsed."""
        with pytest.raises(MalformedImageNameError):
            ImageName("///////////////")

    def test_with_none_is_rejected(self):
        """Setting a part to None is an empty part."""
        with pytest.raises(InvalidNamePartError, match="Illegal use of empty/null name part"):
            ImageName().with_tag(None)


class TestBreakdown:
    """Tests for the parts produced from a parsed name."""

    def test_normal_name(self):
        image = ImageName("docker.io/library/ubuntu:latest")

        assert str(image.registry) == "docker.io"
        assert str(image.namespace) == "library"
        assert str(image.repository) == "ubuntu"
        assert str(image.tag) == "latest"

    def test_with_schema(self):
        image = ImageName("https://docker.io/library/ubuntu:latest")

        assert str(image.registry) == "https://docker.io"
        assert str(image.namespace) == "library"
        assert str(image.repository) == "ubuntu"
        assert str(image.tag) == "latest"

    def test_no_registry(self):
        image = ImageName("library/ubuntu:latest")

        assert image.registry is None
        assert str(image.namespace) == "library"
        assert str(image.repository) == "ubuntu"
        assert str(image.tag) == "latest"

    def test_no_namespace(self):
        image = ImageName("docker.io/ubuntu:latest")

        assert str(image.registry) == "docker.io"
        assert image.namespace is None
        assert str(image.repository) == "ubuntu"
        assert str(image.tag) == "latest"

    def test_no_tag(self):
        image = ImageName("docker.io/library/ubuntu")

        assert str(image.registry) == "docker.io"
        assert str(image.namespace) == "library"
        assert str(image.repository) == "ubuntu"
        assert image.tag is None

    def test_too_many_parts(self):
        """Extra leading segments are kept in the registry."""
        image = ImageName("docker.io/whoops!/library/ubuntu:latest")

        assert str(image.registry) == "docker.io/whoops!"
        assert str(image.namespace) == "library"
        assert str(image.repository) == "ubuntu"
        assert str(image.tag) == "latest"

    def test_missing_part_is_none(self):
        """Using a missing part fails instead of behaving like an empty one."""
        image = ImageName()

        assert image.repository is None
        with pytest.raises(AttributeError):
            image.repository.make_valid()


class TestCleaning:
    """Tests for repairing parsed names."""

    def test_clean_registry(self):
        image = ImageName("https://docker.io/library/ubuntu:latest")

        assert str(image) == "https://docker.io/library/ubuntu:latest"
        assert not image.is_valid()
        assert not image.registry.is_valid()

        image = image.with_registry(image.registry.make_valid())

        assert str(image) == "docker.io/library/ubuntu:latest"
        assert str(image.registry) == "docker.io"
        assert image.is_valid()

    def test_clean_namespace(self):
        image = ImageName("--L$1_Br--4---r  y-/ubuntu")

        assert not image.is_valid()
        assert not image.namespace.is_valid()
        assert str(image.namespace) == "--L$1_Br--4---r  y-"
        assert image.namespace.make_valid().is_valid()
        assert str(image.namespace) == "l1_br-4-r-y"

    def test_clean_repository(self):
        image = ImageName('library/U8u**$ @email@@#~!"£$%^&*n2')

        assert not image.is_valid()
        assert not image.repository.is_valid()
        assert str(image.repository) == 'U8u**$ @email@@#~!"£$%^&*n2'
        assert image.repository.make_valid().is_valid()
        assert str(image.repository) == "u8u-emailn2"

    def test_clean_tag(self):
        image = ImageName("library/ubuntu:_-_-_H3LL0_**$$%^l.T35t")

        assert not image.is_valid()
        assert not image.tag.is_valid()
        assert str(image.tag) == "_-_-_H3LL0_**$$%^l.T35t"
        assert image.tag.make_valid().is_valid()
        assert str(image.tag) == "H3LL0_l.T35t"

    def test_make_valid_repairs_every_part(self):
        """make_valid repairs each part in place and returns the same instance."""
        image = ImageName("https://docker.io/My Org/My App:-v1 beta")

        assert image.make_valid() is image
        assert str(image) == "docker.io/my-org/my-app:v1-beta"
        assert image.is_valid()

    def test_make_valid_does_not_add_repository(self):
        """A name without a repository stays invalid."""
        image = ImageName().with_tag("latest")

        assert not image.make_valid().is_valid()
        assert image.repository is None


class TestValidity:
    """Tests for is_valid and validate on the whole name."""

    @pytest.mark.parametrize(
        "image_name",
        ["ubuntu", "ubuntu:latest", "library/ubuntu", "localhost:5000/ubuntu:1.0", "docker.io/library/ubuntu:trusty"],
    )
    def test_valid_names(self, image_name: str):
        image = ImageName(image_name)

        assert image.is_valid()
        image.validate()

    def test_missing_repository(self):
        """A repository is required."""
        image = ImageName().with_registry("docker.io")

        assert not image.is_valid()
        with pytest.raises(InvalidNamePartError) as exc_info:
            image.validate()
        assert str(exc_info.value) == "Invalid image name: Repository cannot be null"

    def test_validate_checks_repository_first(self):
        """The repository error is reported before the others."""
        image = ImageName("https://docker.io/Bad Org/Ubuntu:-tag")

        with pytest.raises(InvalidNamePartError, match="Invalid repository"):
            image.validate()

    def test_validate_checks_tag_before_namespace(self):
        image = ImageName("https://docker.io/Bad Org/ubuntu:-tag")

        with pytest.raises(InvalidNamePartError, match="Invalid tag"):
            image.validate()

    def test_validate_checks_namespace_before_registry(self):
        image = ImageName("https://docker.io/Bad Org/ubuntu:tag")

        with pytest.raises(InvalidNamePartError, match="Invalid namespace"):
            image.validate()

    def test_validate_checks_registry_last(self):
        image = ImageName("https://docker.io/library/ubuntu:tag")

        with pytest.raises(InvalidNamePartError, match="Invalid registry"):
            image.validate()

    def test_form_validation_message(self):
        """The tag message can be shown to a user verbatim."""
        image = ImageName("library/ubuntu").with_tag("£$%^&*")

        with pytest.raises(InvalidNamePartError) as exc_info:
            image.tag.validate()
        assert str(exc_info.value) == "Invalid tag: Tag must match [a-zA-Z0-9][a-zA-Z0-9_.-]*"


class TestSharedInstance:
    """Tests for the in-place with_* setters."""

    def test_setters_return_same_instance(self):
        image = ImageName("library/ubuntu")

        assert image.with_registry("docker.io") is image
        assert image.with_namespace("team") is image
        assert image.with_repository("app") is image
        assert image.with_tag("v1") is image

    def test_change_is_seen_through_other_reference(self):
        image = ImageName("library/ubuntu")
        alias = image

        alias.with_registry("docker.io")

        assert str(image) == "docker.io/library/ubuntu"


class TestRoundTrip:
    """Tests for rendering then parsing valid names."""

    @pytest.mark.parametrize(
        "registry,namespace,repository,tag",
        [
            ("docker.io", "library", "ubuntu", "trusty"),
            ("localhost:5000", "team", "my.app", "v1.0"),
            ("registry.example.com/mirror", "my_org", "web-app", "Release_2"),
            ("host", "ab", "a", "1"),
        ],
    )
    def test_round_trip(self, registry: str, namespace: str, repository: str, tag: str):
        image = ImageName().with_registry(registry).with_namespace(namespace).with_repository(repository).with_tag(tag)
        assert image.is_valid()

        parsed = ImageName(str(image))

        assert parsed.registry == image.registry
        assert parsed.namespace == image.namespace
        assert parsed.repository == image.repository
        assert parsed.tag == image.tag
