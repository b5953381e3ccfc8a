"""Tests for service layer."""

import asyncio

import pytest
from shorturl.exceptions import (
    InvalidURLError,
    LinkNotFoundError,
    MalformedURLError,
    UnresolvableHostError,
)


class TestSubmit:
    """Test validate-and-store."""

    @pytest.mark.asyncio
    async def test_first_submit_gets_id_one(self, service):
        """First successful submit in a fresh store gets id 1."""
        link = await service.submit("https://www.example.com")

        assert link.id == 1
        assert link.original_url == "https://www.example.com"
        assert link.to_dict() == {"original_url": "https://www.example.com", "short_url": 1}

    @pytest.mark.asyncio
    async def test_ids_strictly_increase(self, service, sample_urls):
        """Successive submits get 1, 2, 3."""
        ids = [(await service.submit(url)).id for url in sample_urls]

        assert ids == [1, 2, 3]

    @pytest.mark.asyncio
    async def test_url_echoed_verbatim(self, service):
        """The submitted string is stored and returned without normalization."""
        raw = "HTTPS://WWW.Example.COM:443/a/../b?x=1&y=%20#top"

        link = await service.submit(raw)

        assert link.original_url == raw
        assert service.resolve(link.id) == raw

    @pytest.mark.asyncio
    async def test_host_is_resolved(self, service, resolver):
        """The URL's host, lowercased and without port, is looked up."""
        await service.submit("https://GitHub.com:8443/user/repo")

        assert resolver.lookups == ["github.com"]

    @pytest.mark.asyncio
    async def test_other_schemes_accepted(self, service):
        """Any scheme is accepted when the host resolves."""
        link = await service.submit("ftp://example.com/file.txt")

        assert link.id == 1

    @pytest.mark.asyncio
    async def test_ip_literal_host(self, service):
        """IP literals are accepted when they resolve."""
        link = await service.submit("http://127.0.0.1:8080/status")

        assert link.original_url == "http://127.0.0.1:8080/status"

    @pytest.mark.asyncio
    async def test_mailto_host_is_resolved(self, service, resolver):
        """A host after "user@" without "//" is looked up and accepted."""
        link = await service.submit("mailto:someone@example.com")

        assert link.id == 1
        assert link.original_url == "mailto:someone@example.com"
        assert resolver.lookups == ["example.com"]

    @pytest.mark.asyncio
    async def test_opaque_host_without_userinfo(self, service, resolver):
        """A bare host after the scheme is looked up too."""
        link = await service.submit("news:comp.lang")

        assert link.id == 1
        assert resolver.lookups == ["comp.lang"]

    @pytest.mark.asyncio
    async def test_opaque_unknown_host(self, service, store):
        """Opaque URLs whose host does not resolve are rejected."""
        with pytest.raises(UnresolvableHostError):
            await service.submit("mailto:someone@does-not-exist.invalid")

        assert store.count() == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize("raw", [
        "not a url",
        "www.example.com",
        "/relative/path",
        "javascript:alert(1)",
        "http:example.com",
        "http://",
        "https:///path-only",
        "http://[::1",
        "",
        None,
    ])
    async def test_malformed_url(self, service, store, resolver, raw):
        """URLs without scheme or host are rejected before resolution."""
        with pytest.raises(MalformedURLError):
            await service.submit(raw)

        assert store.count() == 0
        assert resolver.lookups == []

    @pytest.mark.asyncio
    async def test_unresolvable_host(self, service, store):
        """Syntactically valid URLs with unknown hosts are rejected."""
        with pytest.raises(UnresolvableHostError):
            await service.submit("ftp://no-protocol-issue-but-weird")

        assert store.count() == 0

    @pytest.mark.asyncio
    async def test_rejection_does_not_consume_id(self, service):
        """A rejected submit leaves the next id unchanged."""
        with pytest.raises(InvalidURLError):
            await service.submit("https://does-not-exist.invalid")
        with pytest.raises(InvalidURLError):
            await service.submit("not a url")

        link = await service.submit("https://www.example.com")

        assert link.id == 1

    @pytest.mark.asyncio
    async def test_concurrent_submits_get_distinct_ids(self, service, resolver):
        """Concurrent submits never collide."""
        urls = [f"https://example.com/page_{i}" for i in range(50)]

        links = await asyncio.gather(*(service.submit(url) for url in urls))

        ids = [link.id for link in links]
        assert sorted(ids) == list(range(1, 51))
        for link in links:
            assert service.resolve(link.id) == link.original_url


class TestResolve:
    """Test lookup-and-redirect."""

    @pytest.mark.asyncio
    async def test_resolve_after_submit(self, service):
        """Resolve returns the exact original URL."""
        await service.submit("https://www.example.com")

        assert service.resolve(1) == "https://www.example.com"

    @pytest.mark.asyncio
    async def test_resolve_string_id(self, service):
        """Resolve accepts the decimal string form used in paths."""
        await service.submit("https://www.example.com")

        assert service.resolve("1") == "https://www.example.com"

    @pytest.mark.asyncio
    async def test_resolve_is_idempotent(self, service, store):
        """Repeated resolves return the same URL and change nothing."""
        await service.submit("https://github.com/user/repo")

        results = [service.resolve(1) for _ in range(5)]

        assert results == ["https://github.com/user/repo"] * 5
        assert store.count() == 1

    def test_resolve_never_issued(self, service):
        """Unknown id raises LinkNotFoundError."""
        with pytest.raises(LinkNotFoundError):
            service.resolve(999)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("link_id", ["01", "1.0", " 1", "abc", "-1", "0", 0, -1, True])
    async def test_resolve_non_canonical_id(self, service, link_id):
        """Spellings other than the issued decimal form never match."""
        await service.submit("https://www.example.com")

        with pytest.raises(LinkNotFoundError):
            service.resolve(link_id)


class TestHealth:
    """Test health reporting."""

    @pytest.mark.asyncio
    async def test_health_check(self, service):
        """Health reports the number of stored links."""
        await service.submit("https://www.example.com")

        health = service.health_check()

        assert health["overall"] is True
        assert health["links"] == 1
