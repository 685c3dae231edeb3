"""Fill the same weighted samples into a dense and a sparse storage."""

from histostore import WeightedSum, storage_adaptor

DenseStorage = storage_adaptor(list, WeightedSum)
SparseStorage = storage_adaptor(dict[int, WeightedSum])


def bin_index(x: float, bins: int = 10, start: float = 0.0, stop: float = 1.0) -> int:
    return min(int((x - start) / (stop - start) * bins), bins - 1)


def main() -> None:
    samples = [(0.05, 1.0), (0.12, 0.5), (0.13, 2.0), (0.97, 1.0)]

    dense = DenseStorage()
    dense.reset(10)
    for x, weight in samples:
        dense.add(bin_index(x), weight)

    sparse = SparseStorage(dense)
    print(f"dense cells: {dense.size()}, sparse entries: {len(sparse.container)}")
    for index, cell in sparse.entries():
        print(f"bin {index}: sum={cell.value:.2f} variance={cell.variance:.2f}")

    dense *= 2.0
    print(f"after scaling, bin 1 sum={dense[1].value:.2f}")
    assert sparse != dense


if __name__ == "__main__":
    main()
