"""Application state store.

Commands go through ``dispatch``: the matching use case runs, its result is
turned into a patch of the current state, and every subscriber receives the
new snapshot. A command that fails with a domain, storage or validation
error leaves the state as it was, apart from ``error`` carrying the message.
"""

from collections.abc import Awaitable, Callable

import logfire

from comicraft.adapter.error import AdapterError
from comicraft.application.usecase.community import (
    CreateCommunityRequest,
    CreateCommunityUseCase,
    GetCommunityRequest,
    GetCommunityUseCase,
    JoinCommunityRequest,
    JoinCommunityUseCase,
    LeaveCommunityRequest,
    LeaveCommunityUseCase,
    ListSnippetsRequest,
    ListSnippetsUseCase,
    SnippetItem,
)
from comicraft.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostUseCase,
    ListPostsRequest,
    ListPostsUseCase,
)
from comicraft.application.usecase.vote import (
    ListVotesRequest,
    ListVotesUseCase,
    VoteItem,
    VotePostRequest,
    VotePostUseCase,
)
from comicraft.domain.error import DomainError

from .command import (
    Command,
    CreateCommunity,
    DeletePost,
    FetchCommunity,
    FetchPosts,
    FetchSnippets,
    FetchVotes,
    JoinCommunity,
    LeaveCommunity,
    SelectPost,
    SignOut,
    SubmitPost,
    VotePost,
)
from .state import AppState, CommunityState, PostState

Listener = Callable[[AppState], None]
Patch = Callable[[AppState], AppState]


def _with_community(state: AppState, **changes) -> AppState:
    return state.model_copy(update={"community": state.community.model_copy(update=changes)})


def _with_post(state: AppState, **changes) -> AppState:
    return state.model_copy(update={"post": state.post.model_copy(update=changes)})


class Store:
    """Holds the current ``AppState`` and notifies subscribers of changes."""

    def __init__(
        self,
        list_snippets: ListSnippetsUseCase,
        get_community: GetCommunityUseCase,
        join_community: JoinCommunityUseCase,
        leave_community: LeaveCommunityUseCase,
        create_community: CreateCommunityUseCase,
        create_post: CreatePostUseCase,
        delete_post: DeletePostUseCase,
        list_posts: ListPostsUseCase,
        vote_post: VotePostUseCase,
        list_votes: ListVotesUseCase,
        initial: AppState | None = None,
    ) -> None:
        self.list_snippets = list_snippets
        self.get_community = get_community
        self.join_community = join_community
        self.leave_community = leave_community
        self.create_community = create_community
        self.create_post = create_post
        self.delete_post = delete_post
        self.list_posts = list_posts
        self.vote_post = vote_post
        self.list_votes = list_votes

        self._state = initial or AppState()
        self._listeners: list[Listener] = []
        self._effects: dict[type[Command], Callable[..., Awaitable[Patch]]] = {
            FetchSnippets: self._fetch_snippets,
            FetchCommunity: self._fetch_community,
            CreateCommunity: self._create_community,
            JoinCommunity: self._join_community,
            LeaveCommunity: self._leave_community,
            FetchPosts: self._fetch_posts,
            SubmitPost: self._submit_post,
            DeletePost: self._delete_post,
            VotePost: self._vote_post,
            FetchVotes: self._fetch_votes,
            SelectPost: self._select_post,
            SignOut: self._sign_out,
        }

    @property
    def state(self) -> AppState:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener for state changes.

        Returns:
            Function that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _set(self, state: AppState) -> None:
        self._state = state
        for listener in list(self._listeners):
            listener(state)

    async def dispatch(self, command: Command) -> AppState:
        """Run a command and apply its result to the state.

        Args:
            command: Command to run

        Returns:
            The state after the command

        Raises:
            TypeError: If no effect handles the command
        """
        effect = self._effects.get(type(command))
        if effect is None:
            raise TypeError(f"Unsupported command: {type(command).__name__}")

        name = type(command).__name__
        with logfire.span("store.dispatch", command=name):
            self._set(self._state.model_copy(update={"loading": True, "error": None}))
            try:
                patch = await effect(command)
            except (DomainError, AdapterError, ValueError) as e:
                logfire.warn("Command failed", command=name, error=str(e))
                self._set(self._state.model_copy(update={"loading": False, "error": str(e)}))
                return self._state
            except Exception:
                self._set(self._state.model_copy(update={"loading": False}))
                raise

            # Patches apply to the state current at completion time
            self._set(patch(self._state).model_copy(update={"loading": False}))
            return self._state

    # Effects

    async def _fetch_snippets(self, command: FetchSnippets) -> Patch:
        result = await self.list_snippets.execute(
            ListSnippetsRequest(user_id=command.user.user_id)
        )
        snippets = tuple(result.snippets)
        return lambda s: _with_community(s, my_snippets=snippets, snippets_fetched=True)

    async def _fetch_community(self, command: FetchCommunity) -> Patch:
        result = await self.get_community.execute(
            GetCommunityRequest(
                community_id=command.community_id,
                user_id=command.user.user_id if command.user else None,
            )
        )
        community = result.community if result else None
        return lambda s: _with_community(s, current_community=community)

    async def _create_community(self, command: CreateCommunity) -> Patch:
        result = await self.create_community.execute(
            CreateCommunityRequest(
                name=command.name,
                privacy_type=command.privacy_type,
                user=command.user,
            )
        )
        snippet = SnippetItem(
            community_id=result.community.community_id,
            is_moderator=True,
            image_url=None,
        )
        return lambda s: _with_community(
            s,
            my_snippets=s.community.my_snippets + (snippet,),
            current_community=result.community,
        )

    async def _join_community(self, command: JoinCommunity) -> Patch:
        result = await self.join_community.execute(
            JoinCommunityRequest(community_id=command.community_id, user=command.user)
        )

        def patch(s: AppState) -> AppState:
            current = s.community.current_community
            if current and current.community_id == result.community.community_id:
                current = result.community
            return _with_community(
                s,
                my_snippets=s.community.my_snippets + (result.snippet,),
                current_community=current,
            )

        return patch

    async def _leave_community(self, command: LeaveCommunity) -> Patch:
        result = await self.leave_community.execute(
            LeaveCommunityRequest(community_id=command.community_id, user=command.user)
        )

        def patch(s: AppState) -> AppState:
            current = s.community.current_community
            if current and current.community_id == result.community_id:
                current = result.community
            return _with_community(
                s,
                my_snippets=tuple(
                    sn
                    for sn in s.community.my_snippets
                    if sn.community_id != result.community_id
                ),
                current_community=current,
            )

        return patch

    async def _fetch_posts(self, command: FetchPosts) -> Patch:
        result = await self.list_posts.execute(
            ListPostsRequest(
                community_id=command.community_id,
                limit=command.limit,
                user=command.user,
            )
        )
        posts = tuple(result.posts)
        return lambda s: _with_post(s, posts=posts)

    async def _submit_post(self, command: SubmitPost) -> Patch:
        result = await self.create_post.execute(
            CreatePostRequest(
                community_id=command.community_id,
                title=command.title,
                body=command.body,
                image=command.image,
                user=command.user,
            )
        )
        return lambda s: _with_post(s, posts=(result.post,) + s.post.posts)

    async def _delete_post(self, command: DeletePost) -> Patch:
        result = await self.delete_post.execute(
            DeletePostRequest(post_id=command.post_id, user=command.user)
        )
        post_id = result.post_id

        def patch(s: AppState) -> AppState:
            if not result.success:
                return s
            selected = s.post.selected_post
            return _with_post(
                s,
                posts=tuple(p for p in s.post.posts if p.post_id != post_id),
                post_votes=tuple(v for v in s.post.post_votes if v.post_id != post_id),
                selected_post=None if selected and selected.post_id == post_id else selected,
            )

        return patch

    async def _vote_post(self, command: VotePost) -> Patch:
        result = await self.vote_post.execute(
            VotePostRequest(
                post_id=command.post_id,
                value=command.value,
                community_id=command.community_id,
                user=command.user,
            )
        )

        def patch(s: AppState) -> AppState:
            votes = tuple(v for v in s.post.post_votes if v.post_id != result.post_id)
            if result.vote_id:
                community_id = command.community_id or next(
                    (p.community_id for p in s.post.posts if p.post_id == result.post_id),
                    "",
                )
                votes += (
                    VoteItem(
                        vote_id=result.vote_id,
                        post_id=result.post_id,
                        community_id=community_id,
                        vote_value=result.user_vote_value,
                    ),
                )

            posts = tuple(
                p.model_copy(update={"vote_status": result.vote_status})
                if p.post_id == result.post_id
                else p
                for p in s.post.posts
            )
            selected = s.post.selected_post
            if selected and selected.post_id == result.post_id:
                selected = selected.model_copy(update={"vote_status": result.vote_status})

            return _with_post(s, posts=posts, post_votes=votes, selected_post=selected)

        return patch

    async def _fetch_votes(self, command: FetchVotes) -> Patch:
        result = await self.list_votes.execute(
            ListVotesRequest(community_id=command.community_id, user_id=command.user.user_id)
        )
        votes = tuple(result.votes)
        return lambda s: _with_post(s, post_votes=votes)

    async def _select_post(self, command: SelectPost) -> Patch:
        def patch(s: AppState) -> AppState:
            selected = next(
                (p for p in s.post.posts if p.post_id == command.post_id), None
            )
            return _with_post(s, selected_post=selected)

        return patch

    async def _sign_out(self, command: SignOut) -> Patch:
        return lambda s: s.model_copy(
            update={"community": CommunityState(), "post": PostState(posts=s.post.posts)}
        )
