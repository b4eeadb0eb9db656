# A naive Bayes spam classifier in the style Paul Graham popularised:
#
#     http://www.paulgraham.com/spam.html
#
# Each word gets a point estimate of P(spam | word) from how often it was
# seen in spam and ham training, relative to how many training events each
# class has had. A list of words is scored by combining the per-word
# estimates as if they were independent:
#
#                  prod(p_i)
#     P = -------------------------------
#          prod(p_i) + prod(1 - p_i)
#
# (the factors of 2 used while accumulating cancel out and only keep the
# running products near 1). Per-word estimates are clamped into
# [min_prob, max_prob] first, so a single word that was only ever seen in
# one class can't force the whole result to exactly 0 or 1. The products
# are taken in decimal arithmetic with enough digits for the number of
# words, so long lists of strong clues don't round to 0 or 1 either.
#
# All counts live in a store handed to the constructor; the classifier keeps
# no state of its own and any number of classifiers may share one store.

import decimal
import logging
import math

from bayesian.errors import InvalidArgumentError
from bayesian.errors import InvalidStateError


logger = logging.getLogger(__name__)

HAM_COUNT = 'nham'
SPAM_COUNT = 'nspam'
HAM_PREFIX = 'h:'
SPAM_PREFIX = 's:'


class Classifier:

    unknown_word_prob = 0.5
    min_prob = 0.01
    max_prob = 0.99
    # significant digits kept beyond what the word count demands
    precision = 28

    def __init__(self, store):
        if store is None:
            raise InvalidArgumentError("a counter store is required")
        self.store = store

    def _get_store(self):
        store = getattr(self, 'store', None)
        if store is None:
            raise InvalidStateError("classifier has no counter store")
        return store

    def ham_total(self):
        """Number of record_ham() calls so far."""
        return self._get_store().get(HAM_COUNT)

    def spam_total(self):
        """Number of record_spam() calls so far."""
        return self._get_store().get(SPAM_COUNT)

    def ham_count(self, word):
        return self._get_store().get(HAM_PREFIX + word)

    def spam_count(self, word):
        return self._get_store().get(SPAM_PREFIX + word)

    def record_ham(self, words):
        """Teach the classifier that words came from a ham message.

        Every occurrence counts, so a word listed twice is counted twice.
        The ham total goes up by one even when words is empty.
        """
        self._record(words, HAM_PREFIX, HAM_COUNT)

    def record_spam(self, words):
        """Teach the classifier that words came from a spam message."""
        self._record(words, SPAM_PREFIX, SPAM_COUNT)

    def _record(self, words, prefix, total_key):
        store = self._get_store()
        n = 0
        for word in words:
            store.increment(prefix + word)
            n += 1
        store.increment(total_key)
        logger.debug("recorded %d words under %r", n, total_key)

    def score_word(self, word):
        """
        Return the probability that word, on its own, indicates spam.

        The return value is a float in [0.0, 1.0]. With no training at all,
        or for a word never seen in either class, it is unknown_word_prob.
        If only one class has been trained, every word scores 1.0 (spam
        only) or 0.0 (ham only).
        """
        if not word:
            raise InvalidArgumentError("word must be a non-empty string")

        nham = self.ham_total()
        nspam = self.spam_total()
        ntotal = nham + nspam

        if ntotal == 0:
            return self.unknown_word_prob
        if nham == 0:
            return 1.0
        if nspam == 0:
            return 0.0

        hamcount = self.ham_count(word)
        spamcount = self.spam_count(word)
        # Both zero would be 0/0 below.
        if hamcount == 0 and spamcount == 0:
            return self.unknown_word_prob

        hamprior = nham / ntotal
        spamprior = nspam / ntotal

        a1 = spamcount * spamprior / nspam
        a2 = hamcount * hamprior / nham
        return a1 / (a1 + a2)

    def score_combined(self, words, evidence=False):
        """
        Return the probability that words, taken together, are spam.

        words is an iterable of words; each occurrence contributes. The
        return value is a Decimal strictly between 0 and 1, exactly 0.5
        for no words. It never rounds to 0 or 1, however many extreme
        words are given: the working precision grows with the number of
        words.

        If optional arg evidence is True, the return value is a pair
            probability, evidence
        where evidence is a list of (word, probability) pairs holding the
        clamped per-word probabilities that went into the result.
        """
        clues = []
        for word in words:
            prob = self.score_word(word)
            if prob > self.max_prob:
                prob = self.max_prob
            elif prob < self.min_prob:
                prob = self.min_prob
            clues.append((word, prob))

        # Each word can move the odds by at most a factor of `spread`, so
        # 1 - P (or P) is never smaller than spread**-n.
        spread = max((1.0 - self.min_prob) / self.min_prob,
                     self.max_prob / (1.0 - self.max_prob))
        ctx = decimal.Context(
            prec=self.precision + math.ceil(len(clues) * math.log10(spread)))

        one = decimal.Decimal(1)
        two = decimal.Decimal(2)
        S = H = one
        for word, prob in clues:
            p = decimal.Decimal(str(prob))
            S = ctx.multiply(S, ctx.multiply(two, p))
            H = ctx.multiply(H, ctx.multiply(two, ctx.subtract(one, p)))

        prob = ctx.divide(S, ctx.add(S, H))

        if evidence:
            clues.sort(key=lambda a: a[1])
            return prob, clues
        else:
            return prob
